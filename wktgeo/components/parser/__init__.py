"""
Parser module for WKT text.

Recursive-descent parsing of WKT into the geometry AST: shared combinators,
one field grammar per geometry variant and the keyword dispatch between them.
"""

from wktgeo.components.parser.base_parser import IGeometryParser
from wktgeo.components.parser.geometry_parsers import (
    CoordParser,
    PointParser,
    LineStringParser,
    PolygonParser,
    MultiPointParser,
    MultiLineStringParser,
    MultiPolygonParser,
    GeometryCollectionParser,
)
from wktgeo.components.parser.parser_factory import GeometryParserFactory
from wktgeo.components.parser.wkt_parser import WktParser, parse_wkt

__all__ = [
    'IGeometryParser',
    'CoordParser',
    'PointParser',
    'LineStringParser',
    'PolygonParser',
    'MultiPointParser',
    'MultiLineStringParser',
    'MultiPolygonParser',
    'GeometryCollectionParser',
    'GeometryParserFactory',
    'WktParser',
    'parse_wkt',
]
