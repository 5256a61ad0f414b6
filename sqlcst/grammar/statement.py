"""Token-level statement grammar.

Splits a statement span into words, numbers, quoted literals, punctuation
and trivia, nesting parenthesized regions as PAREN_GROUP nodes. It knows
nothing about any particular statement language; it exists to give the
tree some real structure and to exercise the statement hook.
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING

from sqlcst.diagnostics import (
    GRAMMAR_UNBALANCED_PAREN,
    GRAMMAR_UNTERMINATED_COMMENT,
    GRAMMAR_UNTERMINATED_STRING,
)
from sqlcst.grammar.kind import StatementKind
from sqlcst.lexer.rules import (
    ESCAPE_CHAR,
    is_identifier_char,
    match_comment,
    match_newline,
    match_whitespace,
)
from sqlcst.syntax import SyntaxKind

if TYPE_CHECKING:
    from sqlcst.parser.context import StatementContext

_QUOTE_KINDS = {
    "'": StatementKind.STRING,
    '"': StatementKind.QUOTED_IDENT,
}


def parse_statement_tokens(text: str, ctx: StatementContext) -> None:
    open_parens: list[int] = []

    with ctx.node(StatementKind.STATEMENT):
        pos = 0
        while pos < len(text):
            ch = text[pos]

            if ch == "(":
                ctx.start_node(StatementKind.PAREN_GROUP)
                open_parens.append(pos)
                ctx.bump(StatementKind.LPAREN, 1)
                pos += 1
                continue

            if ch == ")":
                ctx.bump(StatementKind.RPAREN, 1)
                if open_parens:
                    open_parens.pop()
                    ctx.finish_node()
                else:
                    ctx.error(GRAMMAR_UNBALANCED_PAREN, pos, pos + 1, "no matching `(`")
                pos += 1
                continue

            kind, end = _scan(text, pos, ctx)
            ctx.bump(kind, end - pos)
            pos = end

        while open_parens:
            start = open_parens.pop()
            ctx.error(GRAMMAR_UNBALANCED_PAREN, start, start + 1, "`(` is never closed")
            ctx.finish_node()


def _scan(text: str, pos: int, ctx: StatementContext) -> tuple[IntEnum, int]:
    """Classify the token at `pos`; parentheses are handled by the caller."""
    ch = text[pos]

    end = match_whitespace(text, pos)
    if end is not None:
        return SyntaxKind.WHITESPACE, end

    end = match_newline(text, pos)
    if end is not None:
        return SyntaxKind.NEWLINE, end

    end = match_comment(text, pos)
    if end is not None:
        return SyntaxKind.COMMENT, end
    if text.startswith("/*", pos):
        ctx.error(GRAMMAR_UNTERMINATED_COMMENT, pos, len(text))
        return SyntaxKind.COMMENT, len(text)

    if ch in _QUOTE_KINDS:
        return _QUOTE_KINDS[ch], _scan_quoted(text, pos, ctx)

    if is_identifier_char(ch):
        return _scan_word(text, pos)

    if ch == ";":
        return StatementKind.SEMICOLON, pos + 1

    if ch == ESCAPE_CHAR and pos + 1 < len(text):
        return StatementKind.ESCAPE, pos + 2

    return StatementKind.PUNCT, pos + 1


def _scan_quoted(text: str, pos: int, ctx: StatementContext) -> int:
    quote = text[pos]
    cursor = pos + 1
    while cursor < len(text):
        if text[cursor] != quote:
            cursor += 1
            continue
        # a doubled quote is an escaped quote
        if cursor + 1 < len(text) and text[cursor + 1] == quote:
            cursor += 2
            continue
        return cursor + 1

    ctx.error(GRAMMAR_UNTERMINATED_STRING, pos, len(text))
    return len(text)


def _scan_word(text: str, pos: int) -> tuple[IntEnum, int]:
    end = pos
    while end < len(text) and is_identifier_char(text[end]):
        end += 1

    if not text[pos:end].isdigit():
        return StatementKind.WORD, end

    if end + 1 < len(text) and text[end] == "." and text[end + 1].isdigit():
        end += 1
        while end < len(text) and text[end].isdigit():
            end += 1
    return StatementKind.NUMBER, end
