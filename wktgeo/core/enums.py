from enum import Enum
from typing import Optional


class TokenType(Enum):
    """Lexical token kinds produced by the tokenizer"""
    WORD = "word"
    NUMBER = "number"
    PAREN_OPEN = "("
    PAREN_CLOSE = ")"
    COMMA = ","


class GeometryType(str, Enum):
    """Shapely geometry type enumeration (Enumerator Pattern)"""
    POINT = "Point"
    LINE_STRING = "LineString"
    LINEAR_RING = "LinearRing"
    POLYGON = "Polygon"
    MULTI_POINT = "MultiPoint"
    MULTI_LINE_STRING = "MultiLineString"
    MULTI_POLYGON = "MultiPolygon"
    GEOMETRY_COLLECTION = "GeometryCollection"

    @property
    def keyword(self) -> Optional[str]:
        """WKT keyword for this type, None for types without one (LinearRing)"""
        return _TYPE_TO_KEYWORD.get(self)

    @classmethod
    def from_keyword(cls, keyword: str) -> Optional["GeometryType"]:
        """
        Look up a geometry type by its WKT keyword

        Args:
            keyword: WKT keyword, matched case-insensitively

        Returns:
            Matching GeometryType or None if the keyword is unknown
        """
        return _KEYWORD_TO_TYPE.get(keyword.upper())


_TYPE_TO_KEYWORD = {
    GeometryType.POINT: "POINT",
    GeometryType.LINE_STRING: "LINESTRING",
    GeometryType.POLYGON: "POLYGON",
    GeometryType.MULTI_POINT: "MULTIPOINT",
    GeometryType.MULTI_LINE_STRING: "MULTILINESTRING",
    GeometryType.MULTI_POLYGON: "MULTIPOLYGON",
    GeometryType.GEOMETRY_COLLECTION: "GEOMETRYCOLLECTION",
}

_KEYWORD_TO_TYPE = {keyword: geometry_type for geometry_type, keyword in _TYPE_TO_KEYWORD.items()}


class ElementFailurePolicy(str, Enum):
    """
    What to do when a member of a multi-geometry or collection cannot be converted

    PROPAGATE re-raises the member's error and aborts the whole conversion.
    SKIP drops the member and keeps converting the rest.
    """
    PROPAGATE = "propagate"
    SKIP = "skip"


class CoordinateAxis(Enum):
    """Ordinate names used in coordinate error reporting"""
    X = "X"
    Y = "Y"
