from typing import Any, Iterable, Iterator, Optional, Tuple

from wktgeo.core import TokenType, WKT_GRAMMAR, InvalidNumberError
from wktgeo.models import Token, WktOptions, DEFAULT_OPTIONS
from wktgeo.models.token import PAREN_OPEN, PAREN_CLOSE, COMMA


class Tokens:
    """
    Lazy tokenizer over a WKT string

    Every call to iter() starts lexing again from the beginning of the text,
    so one Tokens object can be walked several times. A single pass cannot be
    resumed once abandoned.
    """

    _PUNCTUATION = {
        WKT_GRAMMAR.PAREN_OPEN: PAREN_OPEN,
        WKT_GRAMMAR.PAREN_CLOSE: PAREN_CLOSE,
        WKT_GRAMMAR.COMMA: COMMA,
    }

    def __init__(self, text: str, options: Optional[WktOptions] = None):
        """
        Initialize tokenizer

        Args:
            text: WKT text to tokenize
            options: Pipeline options; coord_type builds number token values
        """
        self._text = text
        self._coord_type = (options or DEFAULT_OPTIONS).coord_type

    def __iter__(self) -> Iterator[Token]:
        text = self._text
        pos = 0

        while pos < len(text):
            char = text[pos]

            if char == WKT_GRAMMAR.END_OF_INPUT:
                return

            if char in self._PUNCTUATION:
                yield self._PUNCTUATION[char]
                pos += 1
                continue

            if WKT_GRAMMAR.is_whitespace(char):
                pos += 1
                continue

            run, pos = self._read_run(text, pos)
            if WKT_GRAMMAR.is_numberlike(char):
                yield Token(TokenType.NUMBER, self._parse_number(run))
            else:
                yield Token(TokenType.WORD, run)

    @staticmethod
    def _read_run(text: str, start: int) -> Tuple[str, int]:
        """
        Read a word or number run

        The run ends at whitespace, which is consumed, or at a paren, comma or
        end of input marker, which is left for the next token.

        Returns:
            (run text, position to continue lexing from)
        """
        pos = start + 1
        while pos < len(text):
            char = text[pos]
            if WKT_GRAMMAR.is_whitespace(char):
                return text[start:pos], pos + 1
            if WKT_GRAMMAR.is_delimiter(char):
                return text[start:pos], pos
            pos += 1
        return text[start:], pos

    def _parse_number(self, run: str) -> Any:
        """
        Build a number from a number-like run

        Raises:
            InvalidNumberError: If the run is not plain decimal notation
        """
        number_text = run.lstrip("+")
        if not WKT_GRAMMAR.is_decimal_number(number_text):
            raise InvalidNumberError(run, "expected decimal notation")

        try:
            return self._coord_type(number_text)
        except (TypeError, ValueError, ArithmeticError) as e:
            raise InvalidNumberError(run, f"{type(e).__name__}: {str(e)}") from e


class PeekableTokens:
    """One pass over a token stream with single-token lookahead"""

    def __init__(self, tokens: Iterable[Token]):
        self._iterator = iter(tokens)
        self._peeked: Optional[Token] = None
        self._has_peeked = False

    def peek(self) -> Optional[Token]:
        """Get the next token without consuming it, None at end of input"""
        if not self._has_peeked:
            self._peeked = next(self._iterator, None)
            self._has_peeked = True
        return self._peeked

    def next_token(self) -> Optional[Token]:
        """Consume and return the next token, None at end of input"""
        if self._has_peeked:
            self._has_peeked = False
            return self._peeked
        return next(self._iterator, None)

    def next_is(self, token_type: TokenType) -> bool:
        """Check whether the next unconsumed token has the given type"""
        token = self.peek()
        return token is not None and token.is_type(token_type)
