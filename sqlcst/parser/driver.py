"""Top-level parse loop."""

import logging

from sqlcst.cst import TreeBuilder
from sqlcst.diagnostics import (
    LEXER_UNRECOGNIZED_INPUT,
    STATEMENT_INCOMPLETE,
    STATEMENT_PARSER_FAILED,
    STATEMENT_UNBALANCED_NODES,
    Diagnostic,
    DiagnosticSpec,
    ErrorSink,
)
from sqlcst.grammar.opaque import parse_statement_opaque
from sqlcst.lexer import Lexer, Token, TokenKind, syntax_kind_from_token_kind, token_text
from sqlcst.parser.context import StatementContext, StatementParser
from sqlcst.parser.observer import NullObserver, ParseObserver
from sqlcst.parser.options import ParserOptions
from sqlcst.parser.outcome import ParseOutcome
from sqlcst.syntax import SyntaxKind
from sqlcst.text import TextRange

logger = logging.getLogger(__name__)

_DETAIL_LIMIT = 40


class Parser:
    """Drives the lexer over a script and assembles the green tree.

    Trivia and failure regions become leaves directly; statement spans are
    handed to `statement_parser`. A parser runs once: `parse()` consumes it.
    """

    def __init__(
        self,
        text: str,
        statement_parser: StatementParser | None = None,
        *,
        options: ParserOptions | None = None,
        observer: ParseObserver | None = None,
    ) -> None:
        self._text = text
        self._options = options or ParserOptions()
        self._statement_parser = statement_parser or parse_statement_opaque
        self._observer = observer or NullObserver()
        self._lexer = Lexer(text, allow_escaped_semicolon=self._options.allow_escaped_semicolon)
        self._builder = TreeBuilder()
        self._sink = ErrorSink()
        self._consumed = False

    @property
    def options(self) -> ParserOptions:
        return self._options

    def parse(self) -> ParseOutcome:
        if self._consumed:
            raise RuntimeError("Parser already consumed; create a new Parser per input")
        self._consumed = True

        self._builder.start_node(SyntaxKind.ROOT)
        while True:
            token = self._lexer.next_token()
            text = token_text(self._text, token)
            self._observer.on_token(token, text)

            if token.kind == TokenKind.EOF:
                break
            if token.kind == TokenKind.STATEMENT:
                self._parse_statement(token, text)
            elif token.kind == TokenKind.ERROR:
                self._report(token.failure or LEXER_UNRECOGNIZED_INPUT, token.range, _describe(text))
                self._builder.token(SyntaxKind.SKIPPED, text)
            else:
                self._builder.token(syntax_kind_from_token_kind(token.kind), text)
        self._builder.finish_node()

        root, interner = self._builder.finish()
        outcome = ParseOutcome(
            source_text=self._text,
            root=root,
            interner=interner,
            diagnostics=self._sink.diagnostics,
        )
        self._observer.on_finish(outcome)
        return outcome

    def _parse_statement(self, token: Token, text: str) -> None:
        ctx = StatementContext(
            self._builder,
            text,
            token.range,
            self._report,
            verify_text=self._options.verify_statement_text,
        )
        try:
            self._statement_parser(text, ctx)
        except Exception as exc:
            logger.debug("statement parser failed for %s", token.range, exc_info=True)
            ctx.close_open_nodes()
            self._report(STATEMENT_PARSER_FAILED, token.range, f"{type(exc).__name__}: {exc}")
            self._skip_rest(ctx)
            if self._options.reraise_statement_errors:
                raise
            return

        if ctx.depth > 0:
            closed = ctx.close_open_nodes()
            self._report(STATEMENT_UNBALANCED_NODES, token.range, f"closed {closed} node(s)")
        self._skip_rest(ctx)

    def _skip_rest(self, ctx: StatementContext) -> None:
        rest = ctx.remaining
        if not rest:
            return
        rest_range = TextRange.new(ctx.range.end - len(rest), ctx.range.end)
        self._report(STATEMENT_INCOMPLETE, rest_range, _describe(rest))
        self._builder.token(SyntaxKind.SKIPPED, rest)

    def _report(self, spec: DiagnosticSpec, range: TextRange, detail: str | None = None) -> Diagnostic:
        diagnostic = self._sink.report(spec, range, detail)
        self._observer.on_diagnostic(diagnostic)
        return diagnostic


def _describe(text: str) -> str:
    if len(text) > _DETAIL_LIMIT:
        text = text[:_DETAIL_LIMIT] + "..."
    return repr(text)
