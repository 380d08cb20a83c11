"""
Core module for WKT parsing.

Enumerations, lexical constants and the exception hierarchy shared by the
tokenizer, parser and converters.
"""

from wktgeo.core.enums import TokenType, GeometryType, ElementFailurePolicy, CoordinateAxis
from wktgeo.core.grammar_constants import WktGrammarConstants, WKT_GRAMMAR
from wktgeo.core.exceptions import (
    WktException,
    WktLexicalError,
    InvalidNumberError,
    WktSyntaxError,
    MissingParenthesisError,
    MissingOpenParenError,
    MissingCloseParenError,
    ExpectedNumberError,
    InvalidWktFormatError,
    UnknownGeometryTypeError,
    NonAsciiKeywordError,
    NestingTooDeepError,
    ConversionError,
    UnsupportedGeometryError,
    CanonicalModelError,
)

__all__ = [
    'TokenType',
    'GeometryType',
    'ElementFailurePolicy',
    'CoordinateAxis',
    'WktGrammarConstants',
    'WKT_GRAMMAR',
    'WktException',
    'WktLexicalError',
    'InvalidNumberError',
    'WktSyntaxError',
    'MissingParenthesisError',
    'MissingOpenParenError',
    'MissingCloseParenError',
    'ExpectedNumberError',
    'InvalidWktFormatError',
    'UnknownGeometryTypeError',
    'NonAsciiKeywordError',
    'NestingTooDeepError',
    'ConversionError',
    'UnsupportedGeometryError',
    'CanonicalModelError',
]
