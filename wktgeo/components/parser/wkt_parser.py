from typing import Optional
import logging

from wktgeo.core import NestingTooDeepError
from wktgeo.models import Wkt, WktOptions, DEFAULT_OPTIONS
from wktgeo.components.tokenizer import Tokens, PeekableTokens
from wktgeo.components.parser.parser_factory import GeometryParserFactory

logger = logging.getLogger(__name__)


class WktParser:
    """
    Entry point turning WKT text into a Wkt container

    Reads a single geometry per call. Whatever follows the first geometry is
    never read, so trailing text is neither parsed nor rejected.
    """

    def __init__(self, options: Optional[WktOptions] = None):
        """
        Initialize WktParser

        Args:
            options: Pipeline options (default: float coordinates)
        """
        self._options = options or DEFAULT_OPTIONS

    @property
    def options(self) -> WktOptions:
        return self._options

    def parse(self, wkt_str: str) -> Wkt:
        """
        Parse WKT text

        Args:
            wkt_str: WKT text

        Returns:
            Wkt holding one geometry, or no geometry for blank input

        Raises:
            WktLexicalError: If a number token is malformed
            WktSyntaxError: If the text does not follow the WKT grammar
            NestingTooDeepError: If collections nest past the interpreter recursion limit
        """
        tokens = PeekableTokens(Tokens(wkt_str, self._options))
        wkt = Wkt()

        if tokens.peek() is None:
            logger.debug("Empty WKT input, no geometry parsed")
            return wkt

        try:
            geometry = GeometryParserFactory.parse_geometry(tokens)
        except RecursionError as e:
            raise NestingTooDeepError("while parsing") from e

        wkt.add_item(geometry)
        return wkt


def parse_wkt(wkt_str: str, options: Optional[WktOptions] = None) -> Wkt:
    """Parse WKT text into a Wkt container (see WktParser.parse)"""
    return WktParser(options).parse(wkt_str)
