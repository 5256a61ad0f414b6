"""Green CST structures."""

from sqlcst.cst.green import GreenElement, GreenNode, GreenToken, TreeBuilder
from sqlcst.cst.interner import Interner, TextKey
from sqlcst.cst.red import SyntaxElement, SyntaxNode, SyntaxToken, from_green

__all__ = [
    "GreenElement",
    "GreenNode",
    "GreenToken",
    "Interner",
    "SyntaxElement",
    "SyntaxNode",
    "SyntaxToken",
    "TextKey",
    "TreeBuilder",
    "from_green",
]
