"""Statement grammars that plug into the parser's statement hook."""

from sqlcst.grammar.kind import StatementKind
from sqlcst.grammar.opaque import parse_statement_opaque
from sqlcst.grammar.statement import parse_statement_tokens

__all__ = [
    "StatementKind",
    "parse_statement_opaque",
    "parse_statement_tokens",
]
