"""Keeps each statement as one opaque leaf."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlcst.grammar.kind import StatementKind

if TYPE_CHECKING:
    from sqlcst.parser.context import StatementContext


def parse_statement_opaque(text: str, ctx: StatementContext) -> None:
    ctx.token(StatementKind.STATEMENT_SPAN, text)
