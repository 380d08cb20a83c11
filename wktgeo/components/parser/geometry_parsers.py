from typing import Callable

from wktgeo.core import TokenType, GeometryType, CoordinateAxis, ExpectedNumberError
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
)
from wktgeo.components.tokenizer import PeekableTokens
from wktgeo.components.parser.base_parser import IGeometryParser


class CoordParser:
    """Parser for a bare coordinate: exactly two numbers"""

    @classmethod
    def parse(cls, tokens: PeekableTokens) -> Coord:
        """
        Parse an x y pair

        Raises:
            ExpectedNumberError: If either position holds something other than a number
        """
        x = cls._read_number(tokens, CoordinateAxis.X)
        y = cls._read_number(tokens, CoordinateAxis.Y)
        return Coord(x=x, y=y)

    @staticmethod
    def _read_number(tokens: PeekableTokens, axis: CoordinateAxis):
        token = tokens.next_token()
        if token is None or not token.is_type(TokenType.NUMBER):
            raise ExpectedNumberError(axis, token)
        return token.value


class PointParser(IGeometryParser):
    """Parser for POINT fields: one coordinate"""

    geometry_type = GeometryType.POINT

    def parse_fields(self, tokens: PeekableTokens) -> Point:
        return Point(CoordParser.parse(tokens))

    def empty(self) -> Point:
        return Point()


class LineStringParser(IGeometryParser):
    """Parser for LINESTRING fields: comma separated bare coordinates"""

    geometry_type = GeometryType.LINE_STRING

    def parse_fields(self, tokens: PeekableTokens) -> LineString:
        return LineString(self.comma_many(CoordParser.parse, tokens))

    def empty(self) -> LineString:
        return LineString()


class PolygonParser(IGeometryParser):
    """Parser for POLYGON fields: comma separated rings, each in its own parentheses"""

    geometry_type = GeometryType.POLYGON

    def __init__(self):
        self._ring_parser = LineStringParser()

    def parse_fields(self, tokens: PeekableTokens) -> Polygon:
        return Polygon(self.comma_many(self._ring_parser.parse_with_parens, tokens))

    def empty(self) -> Polygon:
        return Polygon()


class MultiPointParser(IGeometryParser):
    """Parser for MULTIPOINT fields: comma separated parenthesized points"""

    geometry_type = GeometryType.MULTI_POINT

    def __init__(self):
        self._point_parser = PointParser()

    def parse_fields(self, tokens: PeekableTokens) -> MultiPoint:
        return MultiPoint(self.comma_many(self._point_parser.parse_with_parens, tokens))

    def empty(self) -> MultiPoint:
        return MultiPoint()


class MultiLineStringParser(IGeometryParser):
    geometry_type = GeometryType.MULTI_LINE_STRING

    def __init__(self):
        self._line_string_parser = LineStringParser()

    def parse_fields(self, tokens: PeekableTokens) -> MultiLineString:
        return MultiLineString(self.comma_many(self._line_string_parser.parse_with_parens, tokens))

    def empty(self) -> MultiLineString:
        return MultiLineString()


class MultiPolygonParser(IGeometryParser):
    geometry_type = GeometryType.MULTI_POLYGON

    def __init__(self):
        self._polygon_parser = PolygonParser()

    def parse_fields(self, tokens: PeekableTokens) -> MultiPolygon:
        return MultiPolygon(self.comma_many(self._polygon_parser.parse_with_parens, tokens))

    def empty(self) -> MultiPolygon:
        return MultiPolygon()


class GeometryCollectionParser(IGeometryParser):
    """
    Parser for GEOMETRYCOLLECTION fields: comma separated full geometries

    Members start with their own keyword, so each one goes back through the
    keyword dispatch supplied as member_parser.
    """

    geometry_type = GeometryType.GEOMETRY_COLLECTION

    def __init__(self, member_parser: Callable[[PeekableTokens], Geometry]):
        """
        Initialize GeometryCollectionParser

        Args:
            member_parser: Parses one keyword-prefixed geometry from the stream
        """
        self._member_parser = member_parser

    def parse_fields(self, tokens: PeekableTokens) -> GeometryCollection:
        return GeometryCollection(self.comma_many(self._member_parser, tokens))

    def empty(self) -> GeometryCollection:
        return GeometryCollection()
