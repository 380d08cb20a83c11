from typing import Any
from dataclasses import dataclass
from wktgeo.core import TokenType


@dataclass(frozen=True)
class Token:
    """A single lexical token; value holds the word text or the parsed number"""
    type: TokenType
    value: Any = None

    def is_type(self, token_type: TokenType) -> bool:
        return self.type is token_type

    def __str__(self) -> str:
        if self.type is TokenType.WORD:
            return f"word '{self.value}'"
        if self.type is TokenType.NUMBER:
            return f"number {self.value}"
        return f"'{self.type.value}'"


# Punctuation tokens carry no value, so one instance each is enough
PAREN_OPEN = Token(TokenType.PAREN_OPEN)
PAREN_CLOSE = Token(TokenType.PAREN_CLOSE)
COMMA = Token(TokenType.COMMA)
