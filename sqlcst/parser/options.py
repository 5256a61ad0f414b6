"""Parser modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class ParseMode(StrEnum):
    """How the driver reacts when a statement parser raises."""

    PERMISSIVE = "permissive"
    STRICT = "strict"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Feature flags controlling lexing and statement-parser supervision."""

    mode: ParseMode = ParseMode.PERMISSIVE
    allow_escaped_semicolon: bool = True
    verify_statement_text: bool = True

    @property
    def reraise_statement_errors(self) -> bool:
        return self.mode == ParseMode.STRICT

    @staticmethod
    def for_mode(mode: ParseMode) -> "ParserOptions":
        return ParserOptions(mode=mode)
