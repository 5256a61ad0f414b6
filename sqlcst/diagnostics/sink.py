"""Ordered diagnostic collection shared by the driver and statement grammars."""

from __future__ import annotations

from collections.abc import Iterator

from sqlcst.diagnostics.codes import DiagnosticSpec
from sqlcst.diagnostics.diagnostic import Diagnostic
from sqlcst.text import TextRange


class ErrorSink:
    """Append-only list of diagnostics in the order they were encountered.

    Reporting never raises; the sink only records.
    """

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return list(self._diagnostics)

    def push(self, diagnostic: Diagnostic) -> Diagnostic:
        self._diagnostics.append(diagnostic)
        return diagnostic

    def report(
        self,
        spec: DiagnosticSpec,
        range: TextRange,
        detail: str | None = None,
    ) -> Diagnostic:
        message = spec.message if detail is None else f"{spec.message}: {detail}"
        return self.push(
            Diagnostic(
                code=spec.code,
                message=message,
                range=range,
                severity=spec.severity,
                hint=spec.hint,
                category=spec.category,
            )
        )

    def messages(self) -> list[str]:
        return [diagnostic.render() for diagnostic in self._diagnostics]

    def __len__(self) -> int:
        return len(self._diagnostics)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._diagnostics)

    def __bool__(self) -> bool:
        return bool(self._diagnostics)
