"""Lossless syntax trees for semicolon-terminated statement scripts."""

from sqlcst.cst import GreenNode, GreenToken, Interner, TreeBuilder
from sqlcst.diagnostics import Diagnostic, ErrorSink
from sqlcst.parser import ParseMode, ParseOutcome, Parser, ParserOptions, parse
from sqlcst.syntax import SyntaxKind

__all__ = [
    "Diagnostic",
    "ErrorSink",
    "GreenNode",
    "GreenToken",
    "Interner",
    "ParseMode",
    "ParseOutcome",
    "Parser",
    "ParserOptions",
    "SyntaxKind",
    "TreeBuilder",
    "parse",
]
