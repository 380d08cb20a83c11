from wktgeo.models.token import Token
from wktgeo.models.coord import Coord
from wktgeo.models.geometries import (
    Geometry,
    Point,
    LineString,
    Polygon,
    MultiPoint,
    MultiLineString,
    MultiPolygon,
    GeometryCollection,
)
from wktgeo.models.wkt_options import WktOptions, DEFAULT_OPTIONS
from wktgeo.models.wkt import Wkt

__all__ = [
    "Token",
    "Coord",
    "Geometry",
    "Point",
    "LineString",
    "Polygon",
    "MultiPoint",
    "MultiLineString",
    "MultiPolygon",
    "GeometryCollection",
    "WktOptions",
    "DEFAULT_OPTIONS",
    "Wkt",
]
