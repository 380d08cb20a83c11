from wktgeo.components.tokenizer import Tokens, PeekableTokens
from wktgeo.components.parser import WktParser, GeometryParserFactory, parse_wkt
from wktgeo.components.conversion import ShapelyConverter, WktConverter, to_shapely, to_wkt

__all__ = [
    "Tokens",
    "PeekableTokens",
    "WktParser",
    "GeometryParserFactory",
    "parse_wkt",
    "ShapelyConverter",
    "WktConverter",
    "to_shapely",
    "to_wkt",
]
