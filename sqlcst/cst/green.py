"""Immutable green CST and the stack-based builder that assembles it."""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from enum import IntEnum
from typing import TypeAlias

from sqlcst.cst.interner import Interner, TextKey
from sqlcst.syntax import SyntaxKind


@dataclass(frozen=True, slots=True)
class GreenToken:
    kind: IntEnum
    key: TextKey
    text: str

    @property
    def text_len(self) -> int:
        return len(self.text)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class GreenNode:
    kind: IntEnum
    children: tuple["GreenElement", ...]

    @property
    def text_len(self) -> int:
        return sum(token.text_len for token in self.tokens())

    @property
    def is_empty(self) -> bool:
        return not self.children

    def tokens(self) -> Iterator[GreenToken]:
        """Yield every leaf in document order."""
        stack: list[Iterator[GreenElement]] = [iter(self.children)]
        while stack:
            child = next(stack[-1], None)
            if child is None:
                stack.pop()
            elif isinstance(child, GreenNode):
                stack.append(iter(child.children))
            else:
                yield child

    def text(self) -> str:
        return "".join(token.text for token in self.tokens())

    def __eq__(self, other: object) -> bool:
        """Structural equality, compared pairwise without recursion."""
        if not isinstance(other, GreenNode):
            return NotImplemented
        pending: list[tuple[GreenNode, GreenNode]] = [(self, other)]
        while pending:
            left, right = pending.pop()
            if left is right:
                continue
            if left.kind != right.kind or len(left.children) != len(right.children):
                return False
            for left_child, right_child in zip(left.children, right.children):
                if isinstance(left_child, GreenNode) and isinstance(right_child, GreenNode):
                    pending.append((left_child, right_child))
                elif left_child != right_child:
                    return False
        return True

    def __hash__(self) -> int:
        return hash((self.kind, self.text()))

    def __repr__(self) -> str:
        return f"GreenNode({self.kind.name}, {len(self.children)} children)"


GreenElement: TypeAlias = GreenNode | GreenToken


class TreeBuilder:
    """Builds a green tree from balanced start/token/finish calls."""

    def __init__(self, interner: Interner | None = None) -> None:
        self._interner = interner if interner is not None else Interner()
        self._stack: list[tuple[IntEnum, list[GreenElement]]] = []
        self._roots: list[GreenNode] = []
        self._finished = False

    @property
    def depth(self) -> int:
        """Number of currently open nodes."""
        return len(self._stack)

    @property
    def interner(self) -> Interner:
        return self._interner

    def start_node(self, kind: IntEnum) -> None:
        self._check_not_finished()
        if self._roots:
            raise RuntimeError("start_node called after the root node was completed")
        self._stack.append((kind, []))

    def token(self, kind: IntEnum, text: str) -> None:
        self._check_not_finished()
        if not self._stack:
            raise RuntimeError("token called with empty builder stack")

        key = self._interner.get_or_intern(text)
        # store the interned object so equal texts share storage
        token = GreenToken(kind=kind, key=key, text=self._interner.resolve(key))
        self._stack[-1][1].append(token)

    def finish_node(self) -> None:
        self._check_not_finished()
        if not self._stack:
            raise RuntimeError("finish_node called with empty builder stack")

        kind, children = self._stack.pop()
        node = GreenNode(kind=kind, children=tuple(children))
        if self._stack:
            self._stack[-1][1].append(node)
            return
        self._roots.append(node)

    @contextmanager
    def node(self, kind: IntEnum):
        """Open `kind` for the duration of the block; it is closed on every exit path."""
        self.start_node(kind)
        try:
            yield self
        finally:
            self.finish_node()

    def finish(self) -> tuple[GreenNode, Interner]:
        self._check_not_finished()
        if self._stack:
            raise RuntimeError("Cannot finish tree: unclosed nodes remain on stack")
        if len(self._roots) != 1:
            raise RuntimeError("Cannot finish tree: no completed root node")

        root = self._roots[0]
        if root.kind != SyntaxKind.ROOT:
            raise RuntimeError(f"Cannot finish tree: top-level node is {root.kind!r}, not ROOT")

        self._finished = True
        self._interner.freeze()
        return root, self._interner

    def _check_not_finished(self) -> None:
        if self._finished:
            raise RuntimeError("TreeBuilder already finished")
