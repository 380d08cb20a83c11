"""
Geometry AST for parsed WKT.

A closed set of immutable variants: Point, LineString, Polygon, MultiPoint,
MultiLineString, MultiPolygon and GeometryCollection. Each node owns its
children, which are stored as tuples so a built tree can never change.
"""

from typing import ClassVar, Optional, Tuple
from abc import ABC, abstractmethod
from dataclasses import dataclass

from wktgeo.core import GeometryType
from wktgeo.models.coord import Coord


class Geometry(ABC):
    """Abstract base class for all geometry AST nodes"""

    geometry_type: ClassVar[GeometryType]

    @property
    @abstractmethod
    def is_empty(self) -> bool:
        """Check if this geometry has no coordinate content (WKT EMPTY)"""
        pass

    def __str__(self) -> str:
        return self.geometry_type.keyword


def _freeze(instance: Geometry, field_name: str) -> None:
    # Frozen dataclasses need object.__setattr__ to normalize fields
    object.__setattr__(instance, field_name, tuple(getattr(instance, field_name)))


@dataclass(frozen=True)
class Point(Geometry):
    """A point; coord is None for POINT EMPTY"""
    geometry_type: ClassVar[GeometryType] = GeometryType.POINT

    coord: Optional[Coord] = None

    @property
    def is_empty(self) -> bool:
        return self.coord is None


@dataclass(frozen=True)
class LineString(Geometry):
    geometry_type: ClassVar[GeometryType] = GeometryType.LINE_STRING

    coords: Tuple[Coord, ...] = ()

    def __post_init__(self):
        _freeze(self, "coords")

    @property
    def is_empty(self) -> bool:
        return not self.coords


@dataclass(frozen=True)
class Polygon(Geometry):
    """
    A polygon made of rings

    Ring 0 is the exterior boundary, the remaining rings are interiors (holes).
    Zero rings is POLYGON EMPTY.
    """
    geometry_type: ClassVar[GeometryType] = GeometryType.POLYGON

    rings: Tuple[LineString, ...] = ()

    def __post_init__(self):
        _freeze(self, "rings")

    @property
    def is_empty(self) -> bool:
        return not self.rings

    @property
    def exterior(self) -> Optional[LineString]:
        """Get exterior ring, None for an empty polygon"""
        return self.rings[0] if self.rings else None

    @property
    def interiors(self) -> Tuple[LineString, ...]:
        """Get interior rings in order"""
        return self.rings[1:]


@dataclass(frozen=True)
class MultiPoint(Geometry):
    geometry_type: ClassVar[GeometryType] = GeometryType.MULTI_POINT

    points: Tuple[Point, ...] = ()

    def __post_init__(self):
        _freeze(self, "points")

    @property
    def is_empty(self) -> bool:
        return not self.points


@dataclass(frozen=True)
class MultiLineString(Geometry):
    geometry_type: ClassVar[GeometryType] = GeometryType.MULTI_LINE_STRING

    line_strings: Tuple[LineString, ...] = ()

    def __post_init__(self):
        _freeze(self, "line_strings")

    @property
    def is_empty(self) -> bool:
        return not self.line_strings


@dataclass(frozen=True)
class MultiPolygon(Geometry):
    geometry_type: ClassVar[GeometryType] = GeometryType.MULTI_POLYGON

    polygons: Tuple[Polygon, ...] = ()

    def __post_init__(self):
        _freeze(self, "polygons")

    @property
    def is_empty(self) -> bool:
        return not self.polygons


@dataclass(frozen=True)
class GeometryCollection(Geometry):
    """A collection of arbitrary geometries, possibly nested collections"""
    geometry_type: ClassVar[GeometryType] = GeometryType.GEOMETRY_COLLECTION

    geometries: Tuple[Geometry, ...] = ()

    def __post_init__(self):
        _freeze(self, "geometries")

    @property
    def is_empty(self) -> bool:
        return not self.geometries
