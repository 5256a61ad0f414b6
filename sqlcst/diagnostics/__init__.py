"""Diagnostics."""

from sqlcst.diagnostics.codes import (
    GRAMMAR_UNBALANCED_PAREN,
    GRAMMAR_UNTERMINATED_COMMENT,
    GRAMMAR_UNTERMINATED_STRING,
    LEXER_UNRECOGNIZED_INPUT,
    LEXER_UNTERMINATED_BLOCK_COMMENT,
    LEXER_UNTERMINATED_STATEMENT,
    STATEMENT_INCOMPLETE,
    STATEMENT_PARSER_FAILED,
    STATEMENT_UNBALANCED_NODES,
    DiagnosticSpec,
)
from sqlcst.diagnostics.diagnostic import Diagnostic, Severity
from sqlcst.diagnostics.report import has_errors
from sqlcst.diagnostics.sink import ErrorSink

__all__ = [
    "GRAMMAR_UNBALANCED_PAREN",
    "GRAMMAR_UNTERMINATED_COMMENT",
    "GRAMMAR_UNTERMINATED_STRING",
    "LEXER_UNRECOGNIZED_INPUT",
    "LEXER_UNTERMINATED_BLOCK_COMMENT",
    "LEXER_UNTERMINATED_STATEMENT",
    "STATEMENT_INCOMPLETE",
    "STATEMENT_PARSER_FAILED",
    "STATEMENT_UNBALANCED_NODES",
    "Diagnostic",
    "DiagnosticSpec",
    "ErrorSink",
    "Severity",
    "has_errors",
]
