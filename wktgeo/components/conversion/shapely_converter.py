from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence
import logging

import numpy as np
from shapely.errors import ShapelyError
from shapely.geometry import Point as ShapelyPoint
from shapely.geometry import LineString as ShapelyLineString
from shapely.geometry import Polygon as ShapelyPolygon
from shapely.geometry import MultiPoint as ShapelyMultiPoint
from shapely.geometry import MultiLineString as ShapelyMultiLineString
from shapely.geometry import MultiPolygon as ShapelyMultiPolygon
from shapely.geometry import GeometryCollection as ShapelyGeometryCollection
from shapely.geometry.base import BaseGeometry

from wktgeo.core import (
    GeometryType,
    ElementFailurePolicy,
    ConversionError,
    UnsupportedGeometryError,
    CanonicalModelError,
)
from wktgeo.models import (
    Coord,
    Geometry,
    Point,
    LineString,
    Polygon,
    MultiPoint,
    MultiLineString,
    MultiPolygon,
    GeometryCollection,
    WktOptions,
    DEFAULT_OPTIONS,
)

logger = logging.getLogger(__name__)


class ShapelyConverter:
    """
    Adapter converting geometry AST nodes to shapely geometries (Adapter Pattern)

    The mapping is structural: every AST variant becomes the shapely geometry of
    the same kind, with coordinate, ring and member order preserved. Members of
    multi-geometries and collections that cannot be converted are handled by
    the options' element failure policy.
    """

    def __init__(self, options: Optional[WktOptions] = None):
        """
        Initialize ShapelyConverter

        Args:
            options: Pipeline options (default: propagate member failures)
        """
        self._options = options or DEFAULT_OPTIONS

        # Strategy map: GeometryType -> conversion function (Strategy Pattern)
        self._handlers: Dict[GeometryType, Callable[[Any], BaseGeometry]] = {
            GeometryType.POINT: self._convert_point,
            GeometryType.LINE_STRING: self._convert_line_string,
            GeometryType.POLYGON: self._convert_polygon,
            GeometryType.MULTI_POINT: self._convert_multi_point,
            GeometryType.MULTI_LINE_STRING: self._convert_multi_line_string,
            GeometryType.MULTI_POLYGON: self._convert_multi_polygon,
            GeometryType.GEOMETRY_COLLECTION: self._convert_geometry_collection,
        }

    @property
    def options(self) -> WktOptions:
        return self._options

    def convert(self, geometry: Geometry) -> BaseGeometry:
        """
        Convert an AST geometry to shapely

        Args:
            geometry: Geometry AST node

        Returns:
            Equivalent shapely geometry

        Raises:
            UnsupportedGeometryError: For an EMPTY point, a non-AST value or collections
                nested past the interpreter recursion limit
            CanonicalModelError: If shapely rejects the coordinates
        """
        try:
            return self._convert_geometry(geometry)
        except RecursionError as e:
            raise UnsupportedGeometryError(
                GeometryType.GEOMETRY_COLLECTION,
                "collections are nested too deeply"
            ) from e

    def _convert_geometry(self, geometry: Geometry) -> BaseGeometry:
        geometry_type = getattr(geometry, "geometry_type", None)
        handler = self._handlers.get(geometry_type)
        if handler is None:
            raise UnsupportedGeometryError(type(geometry).__name__, "not a WKT geometry node")

        result = handler(geometry)
        logger.debug(f"Converted {geometry_type.keyword} to shapely {result.geom_type}")
        return result

    @staticmethod
    def _build(geometry_type: GeometryType, factory: Callable[..., BaseGeometry], *args) -> BaseGeometry:
        """Call a shapely constructor, wrapping its errors"""
        try:
            return factory(*args)
        except (ShapelyError, ValueError) as e:
            raise CanonicalModelError(geometry_type, f"{type(e).__name__}: {str(e)}") from e

    @staticmethod
    def _coords_to_lists(coords: Iterable[Coord]) -> List[List[float]]:
        # shapely stores float64 regardless of the pipeline's coord_type
        array = np.asarray([coord.to_tuple() for coord in coords], dtype=np.float64)
        return array.reshape(-1, 2).tolist()

    def _convert_members(self, members: Sequence[Any], convert: Callable[[Any], BaseGeometry]) -> List[BaseGeometry]:
        """
        Convert members of a multi-geometry or collection

        Under PROPAGATE the first member failure aborts the conversion; under
        SKIP failing members are left out and logged.
        """
        converted = []
        for index, member in enumerate(members):
            try:
                converted.append(convert(member))
            except ConversionError as e:
                if self._options.element_failure_policy == ElementFailurePolicy.PROPAGATE:
                    raise
                logger.warning(f"Skipping member {index} ({member}): {str(e)}")
        return converted

    def _convert_point(self, point: Point) -> BaseGeometry:
        if point.coord is None:
            raise UnsupportedGeometryError(GeometryType.POINT, "EMPTY point has no shapely representation")
        x, y = self._coords_to_lists([point.coord])[0]
        return self._build(GeometryType.POINT, ShapelyPoint, x, y)

    def _convert_line_string(self, line_string: LineString) -> BaseGeometry:
        return self._build(GeometryType.LINE_STRING, ShapelyLineString, self._coords_to_lists(line_string.coords))

    def _convert_polygon(self, polygon: Polygon) -> BaseGeometry:
        if polygon.is_empty:
            return ShapelyPolygon()

        shell = self._coords_to_lists(polygon.exterior.coords)
        holes = [self._coords_to_lists(ring.coords) for ring in polygon.interiors]
        return self._build(GeometryType.POLYGON, ShapelyPolygon, shell, holes)

    def _convert_multi_point(self, multi_point: MultiPoint) -> BaseGeometry:
        points = self._convert_members(multi_point.points, self._convert_point)
        return self._build(GeometryType.MULTI_POINT, ShapelyMultiPoint, points)

    def _convert_multi_line_string(self, multi_line_string: MultiLineString) -> BaseGeometry:
        lines = self._convert_members(multi_line_string.line_strings, self._convert_line_string)
        return self._build(GeometryType.MULTI_LINE_STRING, ShapelyMultiLineString, lines)

    def _convert_polygon_member(self, polygon: Polygon) -> BaseGeometry:
        # shapely drops empty parts of a multi polygon instead of rejecting them
        if polygon.is_empty:
            raise CanonicalModelError(GeometryType.POLYGON, "EMPTY polygon cannot be a multi polygon member")
        return self._convert_polygon(polygon)

    def _convert_multi_polygon(self, multi_polygon: MultiPolygon) -> BaseGeometry:
        polygons = self._convert_members(multi_polygon.polygons, self._convert_polygon_member)
        return self._build(GeometryType.MULTI_POLYGON, ShapelyMultiPolygon, polygons)

    def _convert_geometry_collection(self, collection: GeometryCollection) -> BaseGeometry:
        geometries = self._convert_members(collection.geometries, self._convert_geometry)
        return self._build(GeometryType.GEOMETRY_COLLECTION, ShapelyGeometryCollection, geometries)


def to_shapely(geometry: Geometry, options: Optional[WktOptions] = None) -> BaseGeometry:
    """Convert an AST geometry to shapely (see ShapelyConverter.convert)"""
    return ShapelyConverter(options).convert(geometry)
