"""
wktgeo: Well-Known Text parsing and shapely conversion.

Parse WKT text into an immutable geometry AST and convert between that AST
and shapely geometries:

    wkt = parse_wkt("POINT (10 -20)")
    point = to_shapely(wkt.first())
    to_wkt(point).first() == wkt.first()
"""

from wktgeo.core import (
    GeometryType,
    ElementFailurePolicy,
    WktException,
    WktLexicalError,
    WktSyntaxError,
    ConversionError,
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
    Wkt,
    WktOptions,
)
from wktgeo.components import parse_wkt, to_shapely, to_wkt

__all__ = [
    "GeometryType",
    "ElementFailurePolicy",
    "WktException",
    "WktLexicalError",
    "WktSyntaxError",
    "ConversionError",
    "Coord",
    "Geometry",
    "Point",
    "LineString",
    "Polygon",
    "MultiPoint",
    "MultiLineString",
    "MultiPolygon",
    "GeometryCollection",
    "Wkt",
    "WktOptions",
    "parse_wkt",
    "to_shapely",
    "to_wkt",
]
