"""Syntax kinds owned by the core.

Statement-internal kinds belong to whichever grammar is plugged into the
parser and live in their own enum (see `sqlcst.grammar.kind`). Core values
stay below 100 so grammar enums can start there without clashing.
"""

from enum import IntEnum


class SyntaxKind(IntEnum):
    ROOT = 1

    # Trivia tokens
    WHITESPACE = 10
    NEWLINE = 11
    COMMENT = 12
    SKIPPED = 13  # text of a lexical failure, kept so the tree stays lossless

    @property
    def is_trivia(self) -> bool:
        return self in (
            SyntaxKind.WHITESPACE,
            SyntaxKind.NEWLINE,
            SyntaxKind.COMMENT,
            SyntaxKind.SKIPPED,
        )
