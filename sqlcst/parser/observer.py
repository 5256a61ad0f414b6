"""Opt-in hooks for watching a parse as it runs."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from sqlcst.diagnostics import Diagnostic
from sqlcst.lexer import Token

if TYPE_CHECKING:
    from sqlcst.parser.outcome import ParseOutcome


class ParseObserver(Protocol):
    def on_token(self, token: Token, text: str) -> None: ...

    def on_diagnostic(self, diagnostic: Diagnostic) -> None: ...

    def on_finish(self, outcome: ParseOutcome) -> None: ...


class NullObserver:
    """Default observer; ignores everything."""

    def on_token(self, token: Token, text: str) -> None:
        pass

    def on_diagnostic(self, diagnostic: Diagnostic) -> None:
        pass

    def on_finish(self, outcome: ParseOutcome) -> None:
        pass


class LoggingObserver:
    """Forwards parse events to a `logging` logger."""

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.DEBUG) -> None:
        self._logger = logger if logger is not None else logging.getLogger("sqlcst.parser")
        self._level = level

    def on_token(self, token: Token, text: str) -> None:
        self._logger.log(self._level, "token %s %s %r", token.kind.name, token.range.as_tuple(), text)

    def on_diagnostic(self, diagnostic: Diagnostic) -> None:
        self._logger.log(self._level, "diagnostic %s", diagnostic.render())

    def on_finish(self, outcome: ParseOutcome) -> None:
        self._logger.log(
            self._level,
            "parsed %d chars, %d diagnostics",
            len(outcome.source_text),
            len(outcome.diagnostics),
        )
