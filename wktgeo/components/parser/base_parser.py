from typing import Callable, List, TypeVar
from abc import ABC, abstractmethod

from wktgeo.core import (
    TokenType,
    GeometryType,
    WKT_GRAMMAR,
    MissingOpenParenError,
    MissingCloseParenError,
)
from wktgeo.models import Geometry
from wktgeo.components.tokenizer import PeekableTokens

T = TypeVar("T")


class IGeometryParser(ABC):
    """
    Abstract base class for geometry parsers (Strategy Pattern)

    Each parser handles the field grammar of one geometry variant, i.e. what
    sits between its parentheses. The shared combinators take care of the
    parentheses, the EMPTY keyword and comma separated repetition.
    """

    geometry_type: GeometryType

    @abstractmethod
    def parse_fields(self, tokens: PeekableTokens) -> Geometry:
        """
        Parse the body of the geometry, without its enclosing parentheses

        Args:
            tokens: Token stream positioned right after '('

        Returns:
            Parsed geometry node

        Raises:
            WktException: If the body is malformed
        """
        pass

    @abstractmethod
    def empty(self) -> Geometry:
        """Get the empty instance of the geometry (WKT EMPTY)"""
        pass

    def parse_with_parens(self, tokens: PeekableTokens) -> Geometry:
        """
        Parse '(' fields ')' or the EMPTY keyword

        Args:
            tokens: Token stream positioned after the geometry keyword

        Returns:
            Parsed geometry node, the empty instance for EMPTY

        Raises:
            MissingOpenParenError: If neither '(' nor EMPTY comes next
            MissingCloseParenError: If the body is not followed by ')'
        """
        token = tokens.next_token()
        if token is not None and token.is_type(TokenType.WORD) and WKT_GRAMMAR.is_empty_keyword(token.value):
            return self.empty()
        if token is None or not token.is_type(TokenType.PAREN_OPEN):
            raise MissingOpenParenError(self.geometry_type, token)

        result = self.parse_fields(tokens)

        token = tokens.next_token()
        if token is None or not token.is_type(TokenType.PAREN_CLOSE):
            raise MissingCloseParenError(self.geometry_type, token)
        return result

    @staticmethod
    def comma_many(parse_item: Callable[[PeekableTokens], T], tokens: PeekableTokens) -> List[T]:
        """
        Parse one or more items separated by commas

        Args:
            parse_item: Parser for a single item
            tokens: Token stream positioned at the first item

        Returns:
            Parsed items in input order
        """
        items = [parse_item(tokens)]

        while tokens.next_is(TokenType.COMMA):
            tokens.next_token()  # throw away comma
            items.append(parse_item(tokens))

        return items
