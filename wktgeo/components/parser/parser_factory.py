from typing import Dict
import logging

from wktgeo.core import (
    TokenType,
    GeometryType,
    InvalidWktFormatError,
    UnknownGeometryTypeError,
    NonAsciiKeywordError,
)
from wktgeo.models import Geometry
from wktgeo.components.tokenizer import PeekableTokens
from wktgeo.components.parser.base_parser import IGeometryParser
from wktgeo.components.parser.geometry_parsers import (
    PointParser,
    LineStringParser,
    PolygonParser,
    MultiPointParser,
    MultiLineStringParser,
    MultiPolygonParser,
    GeometryCollectionParser,
)

logger = logging.getLogger(__name__)


class GeometryParserFactory:
    """Factory for keyword-dispatched geometry parsers (Factory Pattern + Singleton per geometry type)"""

    _instances: Dict[GeometryType, IGeometryParser] = {}

    @classmethod
    def get_parser(cls, geometry_type: GeometryType) -> IGeometryParser:
        """
        Get parser for a geometry type (Singleton pattern per geometry type)

        Args:
            geometry_type: The geometry type

        Returns:
            Geometry parser instance

        Raises:
            ValueError: If the geometry type has no WKT grammar (LinearRing)
        """
        if geometry_type not in cls._instances:
            parser_map = {
                GeometryType.POINT: PointParser,
                GeometryType.LINE_STRING: LineStringParser,
                GeometryType.POLYGON: PolygonParser,
                GeometryType.MULTI_POINT: MultiPointParser,
                GeometryType.MULTI_LINE_STRING: MultiLineStringParser,
                GeometryType.MULTI_POLYGON: MultiPolygonParser,
            }

            if geometry_type == GeometryType.GEOMETRY_COLLECTION:
                cls._instances[geometry_type] = GeometryCollectionParser(cls.parse_geometry)
            else:
                parser_class = parser_map.get(geometry_type)
                if not parser_class:
                    raise ValueError(f"Unknown geometry type: {geometry_type}")
                cls._instances[geometry_type] = parser_class()

        return cls._instances[geometry_type]

    @classmethod
    def get_parser_for_keyword(cls, keyword: str) -> IGeometryParser:
        """
        Get parser for a WKT keyword, matched case-insensitively

        Raises:
            NonAsciiKeywordError: If the keyword has non-ASCII characters
            UnknownGeometryTypeError: If the keyword names no geometry type
        """
        if not keyword.isascii():
            raise NonAsciiKeywordError(keyword)

        geometry_type = GeometryType.from_keyword(keyword)
        if geometry_type is None:
            raise UnknownGeometryTypeError(keyword.upper())

        return cls.get_parser(geometry_type)

    @classmethod
    def parse_geometry(cls, tokens: PeekableTokens) -> Geometry:
        """
        Parse one keyword-prefixed geometry

        Args:
            tokens: Token stream positioned at the geometry keyword

        Returns:
            Parsed geometry node

        Raises:
            InvalidWktFormatError: If the next token is not a word
        """
        token = tokens.next_token()
        if token is None or not token.is_type(TokenType.WORD):
            raise InvalidWktFormatError(token)

        parser = cls.get_parser_for_keyword(token.value)
        logger.debug(f"Parsing {parser.geometry_type.keyword} geometry")
        return parser.parse_with_parens(tokens)
