"""Parse driver: lexer tokens in, green tree and diagnostics out."""

from sqlcst.parser.context import StatementContext, StatementParser
from sqlcst.parser.driver import Parser
from sqlcst.parser.entrypoint import parse
from sqlcst.parser.observer import LoggingObserver, NullObserver, ParseObserver
from sqlcst.parser.options import ParseMode, ParserOptions
from sqlcst.parser.outcome import ParseOutcome

__all__ = [
    "LoggingObserver",
    "NullObserver",
    "ParseMode",
    "ParseObserver",
    "ParseOutcome",
    "Parser",
    "ParserOptions",
    "StatementContext",
    "StatementParser",
    "parse",
]
