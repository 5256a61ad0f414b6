"""Kinds contributed by the bundled statement grammars."""

from enum import IntEnum


class StatementKind(IntEnum):
    # Whole statement as a single leaf
    STATEMENT_SPAN = 100

    # Nodes
    STATEMENT = 101
    PAREN_GROUP = 102

    # Tokens
    WORD = 110
    NUMBER = 111
    STRING = 112  # '...'
    QUOTED_IDENT = 113  # "..."
    PUNCT = 114
    LPAREN = 115
    RPAREN = 116
    ESCAPE = 117  # backslash plus the escaped character
    SEMICOLON = 118
