"""Red CST wrappers over immutable green nodes/tokens.

Green nodes store no positions; offsets are derived here by summing leaf
lengths while walking the tree once.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import IntEnum
from typing import TypeAlias

from sqlcst.cst.green import GreenElement, GreenNode, GreenToken
from sqlcst.text import TextRange


class SyntaxToken:
    __slots__ = ("kind", "text", "parent", "index_in_parent", "_start")

    def __init__(
        self,
        *,
        green: GreenToken,
        parent: SyntaxNode,
        index_in_parent: int,
        start: int,
    ) -> None:
        self.kind: IntEnum = green.kind
        self.text = green.text
        self.parent = parent
        self.index_in_parent = index_in_parent
        self._start = start

    @property
    def start(self) -> int:
        return self._start

    @property
    def end(self) -> int:
        return self._start + len(self.text)

    @property
    def range(self) -> TextRange:
        return TextRange.new(self.start, self.end)

    def next_sibling(self) -> SyntaxElement | None:
        return _sibling(self.parent, self.index_in_parent + 1)

    def prev_sibling(self) -> SyntaxElement | None:
        return _sibling(self.parent, self.index_in_parent - 1)

    def __repr__(self) -> str:
        return f"SyntaxToken({self.kind.name}, {self.text!r}, {self.start}..{self.end})"


class SyntaxNode:
    __slots__ = (
        "kind",
        "green",
        "parent",
        "index_in_parent",
        "_children",
        "_start",
        "_end",
    )

    def __init__(
        self,
        *,
        green: GreenNode,
        parent: SyntaxNode | None,
        index_in_parent: int,
        start: int,
    ) -> None:
        self.kind: IntEnum = green.kind
        self.green = green
        self.parent = parent
        self.index_in_parent = index_in_parent
        self._start = start
        self._end = start
        self._children: tuple[SyntaxElement, ...] = ()

    @property
    def start(self) -> int:
        return self._start

    @property
    def end(self) -> int:
        return self._end

    @property
    def range(self) -> TextRange:
        return TextRange.new(self._start, self._end)

    @property
    def text(self) -> str:
        return "".join(token.text for token in self.descendants_tokens())

    @property
    def children(self) -> tuple[SyntaxElement, ...]:
        return self._children

    def child_nodes(self) -> tuple[SyntaxNode, ...]:
        return tuple(child for child in self._children if isinstance(child, SyntaxNode))

    def child_tokens(self) -> tuple[SyntaxToken, ...]:
        return tuple(child for child in self._children if isinstance(child, SyntaxToken))

    def descendants_tokens(self) -> tuple[SyntaxToken, ...]:
        tokens: list[SyntaxToken] = []
        pending: list[SyntaxElement] = list(reversed(self._children))
        while pending:
            child = pending.pop()
            if isinstance(child, SyntaxToken):
                tokens.append(child)
            else:
                pending.extend(reversed(child.children))
        return tuple(tokens)

    def token_at_offset(self, offset: int) -> SyntaxToken | None:
        """The leaf whose range contains `offset` (end excluded)."""
        if not self.range.contains(offset):
            return None
        node = self
        while True:
            for child in node.children:
                if not child.range.contains(offset):
                    continue
                if isinstance(child, SyntaxToken):
                    return child
                node = child
                break
            else:
                return None

    def next_sibling(self) -> SyntaxElement | None:
        return _sibling(self.parent, self.index_in_parent + 1)

    def prev_sibling(self) -> SyntaxElement | None:
        return _sibling(self.parent, self.index_in_parent - 1)

    def __repr__(self) -> str:
        return f"SyntaxNode({self.kind.name}, {self._start}..{self._end})"


SyntaxElement: TypeAlias = SyntaxNode | SyntaxToken


_Frame: TypeAlias = tuple[SyntaxNode, list[SyntaxElement], Iterator[tuple[int, GreenElement]]]


def from_green(root: GreenNode) -> SyntaxNode:
    red_root = SyntaxNode(green=root, parent=None, index_in_parent=0, start=0)
    stack: list[_Frame] = [(red_root, [], enumerate(root.children))]
    current = 0

    while stack:
        node, children, pending = stack[-1]
        step = next(pending, None)
        if step is None:
            stack.pop()
            node._children = tuple(children)
            node._end = current
            if stack:
                stack[-1][1].append(node)
            continue

        child_index, child = step
        if isinstance(child, GreenNode):
            red_child = SyntaxNode(
                green=child,
                parent=node,
                index_in_parent=child_index,
                start=current,
            )
            stack.append((red_child, [], enumerate(child.children)))
            continue

        token = SyntaxToken(green=child, parent=node, index_in_parent=child_index, start=current)
        children.append(token)
        current = token.end

    return red_root


def _sibling(parent: SyntaxNode | None, index: int) -> SyntaxElement | None:
    if parent is None or index < 0 or index >= len(parent.children):
        return None
    return parent.children[index]


__all__ = [
    "SyntaxElement",
    "SyntaxNode",
    "SyntaxToken",
    "from_green",
]
