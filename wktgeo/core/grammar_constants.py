"""
Grammar Constants for WKT Lexing

Centralized location for the characters and keywords the tokenizer and
parser treat specially.
"""
import re
import string
from dataclasses import dataclass


@dataclass(frozen=True)
class WktGrammarConstants:
    """
    Immutable lexical constants for WKT text (Immutable Object Pattern)
    """

    # Single-character tokens
    PAREN_OPEN: str = "("
    PAREN_CLOSE: str = ")"
    COMMA: str = ","

    # Skipped between tokens, never emitted
    WHITESPACE: str = " \t\r\n"

    # Besides digits, these characters start a number token
    NUMBER_PREFIXES: str = ".-+"

    # Stops lexing like the end of the text
    END_OF_INPUT: str = "\0"

    EMPTY_KEYWORD: str = "EMPTY"

    # Plain decimal notation once leading '+' signs are stripped; no exponents
    NUMBER_PATTERN: str = r"-?(?:\d+(?:\.\d*)?|\.\d+)"

    @classmethod
    def is_whitespace(cls, char: str) -> bool:
        return char in cls.WHITESPACE

    @classmethod
    def is_numberlike(cls, char: str) -> bool:
        """Check whether a character starts a number token"""
        return char in string.digits or char in cls.NUMBER_PREFIXES

    @classmethod
    def is_delimiter(cls, char: str) -> bool:
        """Characters that end a word or number run without being consumed"""
        return char in (cls.PAREN_OPEN, cls.PAREN_CLOSE, cls.COMMA, cls.END_OF_INPUT)

    @classmethod
    def is_decimal_number(cls, text: str) -> bool:
        return _NUMBER_RE.fullmatch(text) is not None

    @classmethod
    def is_empty_keyword(cls, word: str) -> bool:
        return word.upper() == cls.EMPTY_KEYWORD


_NUMBER_RE = re.compile(WktGrammarConstants.NUMBER_PATTERN, re.ASCII)

# Singleton instance for easy access
WKT_GRAMMAR = WktGrammarConstants()
