"""Core syntax kinds."""

from sqlcst.syntax.kind import SyntaxKind

__all__ = ["SyntaxKind"]
