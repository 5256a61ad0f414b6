"""Lexer."""

from sqlcst.lexer.lexer import Lexer, token_text, tokenize
from sqlcst.lexer.rules import LEX_RULES, LexRule, lex_rules, longest_match
from sqlcst.lexer.tokens import Token, TokenKind, syntax_kind_from_token_kind

__all__ = [
    "LEX_RULES",
    "LexRule",
    "Lexer",
    "Token",
    "TokenKind",
    "lex_rules",
    "longest_match",
    "syntax_kind_from_token_kind",
    "token_text",
    "tokenize",
]
