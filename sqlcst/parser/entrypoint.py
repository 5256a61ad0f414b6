"""High-level parse entrypoint."""

from sqlcst.parser.context import StatementParser
from sqlcst.parser.driver import Parser
from sqlcst.parser.observer import ParseObserver
from sqlcst.parser.options import ParseMode, ParserOptions
from sqlcst.parser.outcome import ParseOutcome


def _resolve_options(
    options: ParserOptions | None,
    mode: ParseMode | None,
) -> ParserOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return ParserOptions.for_mode(mode)

    return ParserOptions()


def parse(
    text: str,
    statement_parser: StatementParser | None = None,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    observer: ParseObserver | None = None,
) -> ParseOutcome:
    resolved_options = _resolve_options(options=options, mode=mode)
    parser = Parser(text, statement_parser, options=resolved_options, observer=observer)
    return parser.parse()
