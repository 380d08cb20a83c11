"""
Custom exceptions for the WKT parsing and conversion system.

This module defines custom exception classes for the three failure families:
lexical errors raised while tokenizing, syntax errors raised while parsing
the WKT grammar, and conversion errors raised while mapping the AST to the
canonical shapely model.
"""

from typing import Any, Optional


def _describe_found(found: Optional[Any]) -> str:
    if found is None:
        return "end of input"
    return str(found)


class WktException(Exception):
    """Base exception class for all WKT errors"""
    pass


class WktLexicalError(WktException):
    """Base exception for errors raised while tokenizing"""
    pass


class InvalidNumberError(WktLexicalError):
    """
    Exception raised when a number-like run of characters is not a valid number.

    Number tokens start with a digit, '.', '-' or '+' and must be plain
    decimal notation, e.g. "12.3.4" or "1e5" are rejected.
    """

    def __init__(self, text: str, details: Optional[str] = None):
        """
        Initialize InvalidNumberError.

        Args:
            text: The offending number text as read from the input
            details: Additional details about the failure (optional)
        """
        self.text = text
        self.details = details

        message = f"Could not parse number: '{text}'"
        if details:
            message += f" ({details})"

        super().__init__(message)


class WktSyntaxError(WktException):
    """Base exception for WKT grammar errors"""
    pass


class MissingParenthesisError(WktSyntaxError):
    """Base exception for a missing '(' or ')'"""

    PARENTHESIS = ""
    POSITION = ""

    def __init__(self, geometry_type: Any, found: Optional[Any] = None):
        """
        Initialize MissingParenthesisError.

        Args:
            geometry_type: Geometry type being parsed when the error occurred
            found: Token found instead of the parenthesis (None at end of input)
        """
        self.geometry_type = geometry_type
        self.found = found

        type_name = getattr(geometry_type, "value", geometry_type)
        message = (
            f"Missing {self.POSITION} parenthesis '{self.PARENTHESIS}' for type {type_name}. "
            f"Found {_describe_found(found)}."
        )
        super().__init__(message)


class MissingOpenParenError(MissingParenthesisError):
    """Exception raised when neither '(' nor EMPTY follows a geometry keyword"""

    PARENTHESIS = "("
    POSITION = "opening"


class MissingCloseParenError(MissingParenthesisError):
    """Exception raised when a geometry body is not terminated by ')'"""

    PARENTHESIS = ")"
    POSITION = "closing"


class ExpectedNumberError(WktSyntaxError):
    """Exception raised when a coordinate position holds something other than a number"""

    def __init__(self, axis: Any, found: Optional[Any] = None):
        """
        Initialize ExpectedNumberError.

        Args:
            axis: Coordinate axis that was being read (X or Y)
            found: Token found instead of the number (None at end of input)
        """
        self.axis = axis
        self.found = found

        axis_name = getattr(axis, "value", axis)
        message = f"Expected a number for the {axis_name} coordinate. Found {_describe_found(found)}."
        super().__init__(message)


class InvalidWktFormatError(WktSyntaxError):
    """Exception raised when a geometry keyword is expected but another token is found"""

    def __init__(self, found: Optional[Any] = None):
        self.found = found
        super().__init__(
            f"Invalid WKT format: expected a geometry type keyword. Found {_describe_found(found)}."
        )


class UnknownGeometryTypeError(WktSyntaxError):
    """Exception raised when a keyword is not one of the seven WKT geometry types"""

    def __init__(self, keyword: str):
        """
        Initialize UnknownGeometryTypeError.

        Args:
            keyword: The unrecognized keyword, upper-cased
        """
        self.keyword = keyword
        super().__init__(f"Invalid geometry type encountered: '{keyword}'")


class NonAsciiKeywordError(WktSyntaxError):
    """Exception raised when a geometry keyword contains non-ASCII characters"""

    def __init__(self, keyword: str):
        self.keyword = keyword
        super().__init__(f"Encountered non-ascii word: '{keyword}'")


class NestingTooDeepError(WktSyntaxError):
    """Exception raised when geometry collections nest deeper than the interpreter can follow"""

    def __init__(self, details: Optional[str] = None):
        """
        Initialize NestingTooDeepError.

        Args:
            details: Details about where the nesting limit was hit
        """
        self.details = details

        message = "Geometry collections are nested too deeply"
        if details:
            message += f" ({details})"
        super().__init__(message)


class ConversionError(WktException):
    """Base exception for AST <-> shapely conversion errors"""
    pass


class UnsupportedGeometryError(ConversionError):
    """
    Exception raised when a geometry has no counterpart in the target model.

    The EMPTY point is the only AST shape with no shapely counterpart.
    """

    def __init__(self, geometry_type: Any, details: str):
        """
        Initialize UnsupportedGeometryError.

        Args:
            geometry_type: Type of the geometry that could not be converted
            details: Details about why the conversion is unsupported
        """
        self.geometry_type = geometry_type
        self.details = details

        type_name = getattr(geometry_type, "value", geometry_type)
        super().__init__(f"Unsupported conversion of {type_name}: {details}")


class CanonicalModelError(ConversionError):
    """Exception raised when shapely rejects a syntactically valid geometry"""

    def __init__(self, geometry_type: Any, details: str):
        """
        Initialize CanonicalModelError.

        Args:
            geometry_type: Type of the geometry shapely refused to build
            details: Error reported by shapely
        """
        self.geometry_type = geometry_type
        self.details = details

        type_name = getattr(geometry_type, "value", geometry_type)
        super().__init__(f"Failed to build shapely {type_name}: {details}")
