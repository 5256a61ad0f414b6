"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

from sqlcst.text import TextRange

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the lexer, driver or statement grammar."""

    code: str
    message: str
    range: TextRange
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    def render(self) -> str:
        return f"{self.code} [{self.range.start}..{self.range.end}]: {self.message}"
