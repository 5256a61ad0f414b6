"""Token rule table.

Rules are tried at every offset in the order listed. The longest match
wins; when two rules match the same length the earlier rule wins. In
practice the rules start on disjoint characters, so the order only pins
behavior down rather than arbitrating real conflicts:

1. statement  - identifier character up to and including the first
                unescaped `;` (may span lines and contain comments)
2. newline    - maximal run of `\\n` / `\\r`
3. comment    - `/* ... */` (non-nesting) or `--` up to the line break
4. whitespace - maximal run of space, tab, form feed
"""

from collections.abc import Callable
from dataclasses import dataclass
from functools import partial
from typing import Final, TypeAlias

from sqlcst.lexer.tokens import TokenKind

Matcher: TypeAlias = Callable[[str, int], int | None]

LINE_BREAK_CHARS: Final[frozenset[str]] = frozenset("\n\r")
SPACING_CHARS: Final[frozenset[str]] = frozenset(" \t\f")
ESCAPE_CHAR: Final[str] = "\\"


@dataclass(frozen=True, slots=True)
class LexRule:
    kind: TokenKind
    name: str
    match: Matcher


def is_identifier_char(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


def match_statement(source: str, offset: int, allow_escape: bool = True) -> int | None:
    if offset >= len(source) or not is_identifier_char(source[offset]):
        return None

    search_from = offset + 1
    while True:
        semicolon = source.find(";", search_from)
        if semicolon == -1:
            return None
        if not allow_escape or not _is_escaped(source, semicolon, lower=offset):
            return semicolon + 1
        search_from = semicolon + 1


def match_newline(source: str, offset: int) -> int | None:
    return _match_run(source, offset, LINE_BREAK_CHARS)


def match_whitespace(source: str, offset: int) -> int | None:
    return _match_run(source, offset, SPACING_CHARS)


def match_comment(source: str, offset: int) -> int | None:
    if source.startswith("/*", offset):
        close = source.find("*/", offset + 2)
        if close == -1:
            return None
        return close + 2

    if source.startswith("--", offset):
        end = offset + 2
        while end < len(source) and source[end] not in LINE_BREAK_CHARS:
            end += 1
        return end

    return None


def lex_rules(allow_escaped_semicolon: bool = True) -> tuple[LexRule, ...]:
    return (
        LexRule(
            TokenKind.STATEMENT,
            "statement",
            partial(match_statement, allow_escape=allow_escaped_semicolon),
        ),
        LexRule(TokenKind.NEWLINE, "newline", match_newline),
        LexRule(TokenKind.COMMENT, "comment", match_comment),
        LexRule(TokenKind.WHITESPACE, "whitespace", match_whitespace),
    )


LEX_RULES: Final[tuple[LexRule, ...]] = lex_rules()


def longest_match(rules: tuple[LexRule, ...], source: str, offset: int) -> tuple[LexRule, int] | None:
    """Return the winning rule and its end offset, or None when nothing matches."""
    best: tuple[LexRule, int] | None = None
    for rule in rules:
        end = rule.match(source, offset)
        if end is None or end <= offset:
            continue
        # strict `>` keeps the earlier rule on equal length
        if best is None or end > best[1]:
            best = (rule, end)
    return best


def can_start_token(source: str, offset: int) -> bool:
    """Whether any rule could begin at `offset`, ignoring whether it terminates."""
    ch = source[offset]
    return (
        is_identifier_char(ch)
        or ch in LINE_BREAK_CHARS
        or ch in SPACING_CHARS
        or source.startswith("/*", offset)
        or source.startswith("--", offset)
    )


def _match_run(source: str, offset: int, chars: frozenset[str]) -> int | None:
    end = offset
    while end < len(source) and source[end] in chars:
        end += 1
    return end if end > offset else None


def _is_escaped(source: str, index: int, lower: int) -> bool:
    backslashes = 0
    cursor = index - 1
    while cursor >= lower and source[cursor] == ESCAPE_CHAR:
        backslashes += 1
        cursor -= 1
    return backslashes % 2 == 1
