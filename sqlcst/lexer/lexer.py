"""Lexer."""

from sqlcst.diagnostics import (
    LEXER_UNRECOGNIZED_INPUT,
    LEXER_UNTERMINATED_BLOCK_COMMENT,
    LEXER_UNTERMINATED_STATEMENT,
)
from sqlcst.lexer.rules import (
    LEX_RULES,
    LINE_BREAK_CHARS,
    SPACING_CHARS,
    LexRule,
    can_start_token,
    is_identifier_char,
    lex_rules,
    longest_match,
)
from sqlcst.lexer.tokens import Token, TokenKind
from sqlcst.text import TextRange, slice_text_range

_TRAILING_TRIVIA = "".join(SPACING_CHARS | LINE_BREAK_CHARS)


class Lexer:
    """Splits a script into statement spans and trivia in one forward pass.

    Input that no rule accepts comes back as an `ERROR` token carrying the
    `DiagnosticSpec` that describes it; the cursor always moves past it, so
    lexing never stalls.
    """

    def __init__(self, source: str, *, allow_escaped_semicolon: bool = True) -> None:
        self._source = source
        self._position = 0
        self._rules: tuple[LexRule, ...] = (
            LEX_RULES if allow_escaped_semicolon else lex_rules(allow_escaped_semicolon=False)
        )

    @property
    def source(self) -> str:
        return self._source

    @property
    def position(self) -> int:
        return self._position

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    def next_token(self) -> Token:
        start = self._position
        if self.is_eof:
            return Token(TokenKind.EOF, TextRange.empty(start))

        matched = longest_match(self._rules, self._source, start)
        if matched is not None:
            rule, end = matched
            self._position = end
            return Token(rule.kind, TextRange.new(start, end))

        return self._lex_failure(start)

    def lex(self) -> list[Token]:
        tokens: list[Token] = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.kind == TokenKind.EOF:
                break
        return tokens

    def _lex_failure(self, start: int) -> Token:
        source = self._source

        if is_identifier_char(source[start]):
            # No unescaped `;` anywhere ahead, so the statement runs to the end.
            spec = LEXER_UNTERMINATED_STATEMENT
            end = self._end_before_trailing_trivia(start)
        elif source.startswith("/*", start):
            spec = LEXER_UNTERMINATED_BLOCK_COMMENT
            end = self._end_before_trailing_trivia(start)
        else:
            spec = LEXER_UNRECOGNIZED_INPUT
            end = start + 1
            while end < len(source) and not can_start_token(source, end):
                end += 1

        self._position = end
        return Token(TokenKind.ERROR, TextRange.new(start, end), failure=spec)

    def _end_before_trailing_trivia(self, start: int) -> int:
        return max(start + 1, len(self._source.rstrip(_TRAILING_TRIVIA)))


def token_text(source: str, token: Token) -> str:
    """Get the text of a token from the source string based on its range."""
    if token.kind == TokenKind.EOF:
        return ""
    return slice_text_range(source, token.range)


def tokenize(source: str, *, allow_escaped_semicolon: bool = True) -> list[Token]:
    """Lex the whole source, including the trailing EOF token."""
    return Lexer(source, allow_escaped_semicolon=allow_escaped_semicolon).lex()
