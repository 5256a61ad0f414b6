"""Result of one parse call."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from sqlcst.cst import GreenNode, Interner, SyntaxNode, from_green
from sqlcst.diagnostics import Diagnostic, has_errors


@dataclass(slots=True)
class ParseOutcome:
    """Green tree, its interner and the diagnostics, produced once per parse.

    Unpacks as ``root, interner, errors`` where ``errors`` are the rendered
    diagnostic strings.
    """

    source_text: str
    root: GreenNode
    interner: Interner
    diagnostics: list[Diagnostic]
    _syntax_root: SyntaxNode | None = field(default=None, init=False, repr=False)

    @property
    def errors(self) -> list[str]:
        return [diagnostic.render() for diagnostic in self.diagnostics]

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    def text(self) -> str:
        """Concatenated leaf text; equals `source_text` for a lossless parse."""
        return self.root.text()

    def syntax_root(self) -> SyntaxNode:
        if self._syntax_root is None:
            self._syntax_root = from_green(self.root)
        return self._syntax_root

    def __iter__(self) -> Iterator[object]:
        return iter((self.root, self.interner, self.errors))
