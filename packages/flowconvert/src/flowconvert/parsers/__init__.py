from flowconvert.parsers.protocol import SessionParser, SessionParserFactory
from flowconvert.parsers.registry import (
    ParserResolutionError,
    load_parser_factory,
)

__all__ = [
    "SessionParser",
    "SessionParserFactory",
    "ParserResolutionError",
    "load_parser_factory",
]
