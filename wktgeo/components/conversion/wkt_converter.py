from typing import Any, Callable, Dict, Optional, Tuple
import logging

import shapely
from shapely.geometry.base import BaseGeometry

from wktgeo.core import GeometryType, UnsupportedGeometryError
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
    Wkt,
    WktOptions,
    DEFAULT_OPTIONS,
)

logger = logging.getLogger(__name__)


class WktConverter:
    """
    Adapter converting shapely geometries to geometry AST nodes (Adapter Pattern)

    Every shapely variant has an AST counterpart, so the conversion itself
    cannot fail. LinearRing has no AST variant of its own and becomes a
    LineString, which means it does not round-trip back to a ring.
    """

    def __init__(self, options: Optional[WktOptions] = None):
        """
        Initialize WktConverter

        Args:
            options: Pipeline options; coord_type builds the AST ordinates
        """
        self._options = options or DEFAULT_OPTIONS

        # Strategy map: shapely geom_type -> conversion function (Strategy Pattern)
        self._handlers: Dict[GeometryType, Callable[[Any], Geometry]] = {
            GeometryType.POINT: self._convert_point,
            GeometryType.LINE_STRING: self._convert_line_string,
            GeometryType.LINEAR_RING: self._convert_line_string,
            GeometryType.POLYGON: self._convert_polygon,
            GeometryType.MULTI_POINT: self._convert_multi_point,
            GeometryType.MULTI_LINE_STRING: self._convert_multi_line_string,
            GeometryType.MULTI_POLYGON: self._convert_multi_polygon,
            GeometryType.GEOMETRY_COLLECTION: self._convert_geometry_collection,
        }

    @property
    def options(self) -> WktOptions:
        return self._options

    def convert(self, geometry: BaseGeometry) -> Wkt:
        """
        Convert a shapely geometry into a Wkt container

        Args:
            geometry: Shapely geometry

        Returns:
            Wkt wrapping exactly one AST geometry

        Raises:
            UnsupportedGeometryError: If the value is not a shapely geometry
        """
        return Wkt([self.convert_geometry(geometry)])

    def convert_geometry(self, geometry: BaseGeometry) -> Geometry:
        """
        Convert a shapely geometry into a single AST node

        Raises:
            UnsupportedGeometryError: If the value is not a shapely geometry, or its
                collections are nested past the interpreter recursion limit
        """
        try:
            return self._convert_geometry(geometry)
        except RecursionError as e:
            raise UnsupportedGeometryError(
                GeometryType.GEOMETRY_COLLECTION,
                "collections are nested too deeply"
            ) from e

    def _convert_geometry(self, geometry: BaseGeometry) -> Geometry:
        geom_type_str = getattr(geometry, "geom_type", None)

        try:
            handler = self._handlers.get(GeometryType(geom_type_str))
        except ValueError:
            handler = None

        if handler is None:
            raise UnsupportedGeometryError(
                geom_type_str or type(geometry).__name__,
                "no WKT geometry counterpart"
            )

        result = handler(geometry)
        logger.debug(f"Converted shapely {geom_type_str} to {result.geometry_type.keyword}")
        return result

    def _coords(self, geometry: BaseGeometry) -> Tuple[Coord, ...]:
        """Read x/y coordinates of a simple geometry, dropping any z"""
        coord_type = self._options.coord_type
        # repr() gives the shortest text that reads back to the same float64
        return tuple(
            Coord(coord_type(repr(float(x))), coord_type(repr(float(y))))
            for x, y in shapely.get_coordinates(geometry)
        )

    def _convert_point(self, point: BaseGeometry) -> Point:
        coords = self._coords(point)
        return Point(coords[0] if coords else None)

    def _convert_line_string(self, line_string: BaseGeometry) -> LineString:
        return LineString(self._coords(line_string))

    def _convert_polygon(self, polygon: BaseGeometry) -> Polygon:
        if polygon.is_empty:
            return Polygon()

        rings = [self._convert_line_string(polygon.exterior)]
        rings.extend(self._convert_line_string(ring) for ring in polygon.interiors)
        return Polygon(rings)

    def _convert_multi_point(self, multi_point: BaseGeometry) -> MultiPoint:
        return MultiPoint([self._convert_point(point) for point in multi_point.geoms])

    def _convert_multi_line_string(self, multi_line_string: BaseGeometry) -> MultiLineString:
        return MultiLineString([self._convert_line_string(line) for line in multi_line_string.geoms])

    def _convert_multi_polygon(self, multi_polygon: BaseGeometry) -> MultiPolygon:
        return MultiPolygon([self._convert_polygon(polygon) for polygon in multi_polygon.geoms])

    def _convert_geometry_collection(self, collection: BaseGeometry) -> GeometryCollection:
        return GeometryCollection([self._convert_geometry(member) for member in collection.geoms])


def to_wkt(geometry: BaseGeometry, options: Optional[WktOptions] = None) -> Wkt:
    """Convert a shapely geometry into a Wkt container (see WktConverter.convert)"""
    return WktConverter(options).convert(geometry)
