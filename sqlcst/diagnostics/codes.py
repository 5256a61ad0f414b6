"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final

from sqlcst.diagnostics.diagnostic import Severity


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LEXER_UNRECOGNIZED_INPUT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNRECOGNIZED_INPUT",
    message="Unrecognized input",
    hint="Statements must start with a letter, digit or underscore.",
    severity="error",
    category="lexer",
)

LEXER_UNTERMINATED_STATEMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_STATEMENT",
    message="Statement is not terminated by `;`",
    hint="End the statement with a semicolon.",
    severity="error",
    category="lexer",
)

LEXER_UNTERMINATED_BLOCK_COMMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_BLOCK_COMMENT",
    message="Block comment is not closed by `*/`",
    severity="error",
    category="lexer",
)

STATEMENT_PARSER_FAILED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="STATEMENT_PARSER_FAILED",
    message="Statement parser raised an exception",
    severity="error",
    category="parser",
)

STATEMENT_INCOMPLETE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="STATEMENT_INCOMPLETE",
    message="Statement parser did not consume the whole statement",
    severity="error",
    category="parser",
)

STATEMENT_UNBALANCED_NODES: Final[DiagnosticSpec] = DiagnosticSpec(
    code="STATEMENT_UNBALANCED_NODES",
    message="Statement parser left nodes open",
    severity="warning",
    category="parser",
)

GRAMMAR_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="GRAMMAR_UNTERMINATED_STRING",
    message="Unterminated quoted literal",
    hint="Quotes cannot contain an unescaped `;`, it ends the statement.",
    severity="error",
    category="grammar",
)

GRAMMAR_UNBALANCED_PAREN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="GRAMMAR_UNBALANCED_PAREN",
    message="Unbalanced parenthesis",
    severity="error",
    category="grammar",
)

GRAMMAR_UNTERMINATED_COMMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="GRAMMAR_UNTERMINATED_COMMENT",
    message="Block comment inside statement is not closed",
    hint="A `;` inside a block comment ends the statement.",
    severity="error",
    category="grammar",
)
