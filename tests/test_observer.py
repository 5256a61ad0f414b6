import logging

from sqlcst.diagnostics import Diagnostic
from sqlcst.lexer import Token, TokenKind
from sqlcst.parser import LoggingObserver, ParseOutcome, parse


class _RecordingObserver:
    def __init__(self) -> None:
        self.tokens: list[tuple[TokenKind, str]] = []
        self.diagnostics: list[Diagnostic] = []
        self.outcomes: list[ParseOutcome] = []

    def on_token(self, token: Token, text: str) -> None:
        self.tokens.append((token.kind, text))

    def on_diagnostic(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)

    def on_finish(self, outcome: ParseOutcome) -> None:
        self.outcomes.append(outcome)


def test_observer_sees_every_token_and_diagnostic() -> None:
    observer = _RecordingObserver()
    outcome = parse("select 1;\n@", observer=observer)

    assert observer.tokens == [
        (TokenKind.STATEMENT, "select 1;"),
        (TokenKind.NEWLINE, "\n"),
        (TokenKind.ERROR, "@"),
        (TokenKind.EOF, ""),
    ]
    assert observer.diagnostics == outcome.diagnostics
    assert observer.outcomes == [outcome]


def test_logging_observer_is_silent_by_default(caplog) -> None:
    caplog.set_level(logging.WARNING)
    parse("select 1;", observer=LoggingObserver())

    assert caplog.records == []


def test_logging_observer_logs_tokens_at_debug(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="sqlcst.parser")
    parse("select 1;\n@", observer=LoggingObserver())

    assert "token STATEMENT (0, 9) 'select 1;'" in caplog.text
    assert "diagnostic LEXER_UNRECOGNIZED_INPUT [10..11]" in caplog.text
    assert "parsed 11 chars, 1 diagnostics" in caplog.text
