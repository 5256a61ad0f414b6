"""Handle given to statement parsers while they build a statement's subtree."""

from collections.abc import Callable
from contextlib import contextmanager
from enum import IntEnum
from typing import Protocol, TypeAlias

from sqlcst.cst import TreeBuilder
from sqlcst.diagnostics import Diagnostic, DiagnosticSpec
from sqlcst.text import TextRange

ReportFn: TypeAlias = Callable[[DiagnosticSpec, TextRange, str | None], Diagnostic]


class StatementContext:
    """Scoped view of the tree builder for one statement span.

    Nodes opened through the context must be closed through it; closing
    below the depth the statement started at raises. Tokens are checked
    against the statement text so the span stays reconstructible. Error
    offsets are relative to the start of the statement.
    """

    def __init__(
        self,
        builder: TreeBuilder,
        text: str,
        range: TextRange,
        report: ReportFn,
        *,
        verify_text: bool = True,
    ) -> None:
        self._builder = builder
        self._text = text
        self._range = range
        self._report = report
        self._verify_text = verify_text
        self._base_depth = builder.depth
        self._consumed = 0

    @property
    def text(self) -> str:
        return self._text

    @property
    def range(self) -> TextRange:
        return self._range

    @property
    def consumed(self) -> int:
        return self._consumed

    @property
    def remaining(self) -> str:
        return self._text[self._consumed :]

    @property
    def is_complete(self) -> bool:
        return self._consumed >= len(self._text)

    @property
    def depth(self) -> int:
        """Nodes opened by this statement that are still open."""
        return self._builder.depth - self._base_depth

    def start_node(self, kind: IntEnum) -> None:
        self._builder.start_node(kind)

    def finish_node(self) -> None:
        if self.depth <= 0:
            raise RuntimeError("finish_node would close a node the statement did not open")
        self._builder.finish_node()

    @contextmanager
    def node(self, kind: IntEnum):
        self.start_node(kind)
        try:
            yield self
        finally:
            self.finish_node()

    def token(self, kind: IntEnum, text: str) -> None:
        if self._verify_text:
            expected = self._text[self._consumed : self._consumed + len(text)]
            if text != expected:
                raise ValueError(
                    f"token text {text!r} does not match statement text {expected!r} at offset {self._consumed}"
                )
        self._builder.token(kind, text)
        self._consumed += len(text)

    def bump(self, kind: IntEnum, length: int) -> None:
        """Emit the next `length` characters of the statement as one token."""
        if length <= 0 or self._consumed + length > len(self._text):
            raise ValueError(f"cannot bump {length} chars with {len(self.remaining)} remaining")
        self.token(kind, self._text[self._consumed : self._consumed + length])

    def error(
        self,
        spec: DiagnosticSpec,
        start: int,
        end: int | None = None,
        detail: str | None = None,
    ) -> Diagnostic:
        end = start if end is None else end
        return self._report(spec, TextRange.new(start, end).shift(self._range.start), detail)

    def close_open_nodes(self) -> int:
        closed = 0
        while self.depth > 0:
            self._builder.finish_node()
            closed += 1
        return closed


class StatementParser(Protocol):
    """Grammar hook: builds whatever structure it wants for one statement span."""

    def __call__(self, text: str, ctx: StatementContext) -> None: ...
