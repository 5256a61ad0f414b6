"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum

from sqlcst.diagnostics import DiagnosticSpec
from sqlcst.syntax import SyntaxKind
from sqlcst.text import TextRange


class TokenKind(IntEnum):
    EOF = 1

    # Opaque statement text, up to and including its `;`
    STATEMENT = 2

    # Trivia tokens
    WHITESPACE = 10
    NEWLINE = 11
    COMMENT = 12

    # Lexical failure; the text is kept and reported
    ERROR = 13

    @property
    def is_trivia(self) -> bool:
        return self in (TokenKind.WHITESPACE, TokenKind.NEWLINE, TokenKind.COMMENT)


def syntax_kind_from_token_kind(kind: TokenKind) -> SyntaxKind:
    """Map lexer trivia/error kinds to the leaf kind stored in the tree.

    Raises for kinds that have no direct leaf (statements, EOF).
    """
    match kind:
        case TokenKind.WHITESPACE:
            return SyntaxKind.WHITESPACE
        case TokenKind.NEWLINE:
            return SyntaxKind.NEWLINE
        case TokenKind.COMMENT:
            return SyntaxKind.COMMENT
        case TokenKind.ERROR:
            return SyntaxKind.SKIPPED
        case _:
            raise ValueError(f"No leaf kind for token kind: {kind!r}")


@dataclass(frozen=True, slots=True)
class Token:
    """A classified span of the input."""

    kind: TokenKind
    range: TextRange
    failure: DiagnosticSpec | None = None

    @property
    def is_error(self) -> bool:
        return self.kind == TokenKind.ERROR
