"""Text interner shared by the green tree's tokens."""

from __future__ import annotations

from typing import TypeAlias

TextKey: TypeAlias = int


class Interner:
    """Maps token text to a stable integer key.

    Identical texts resolve to the same key and the same stored ``str``
    object. Once frozen, new text can no longer be added but every existing
    key still resolves.
    """

    __slots__ = ("_keys", "_texts", "_frozen")

    def __init__(self) -> None:
        self._keys: dict[str, TextKey] = {}
        self._texts: list[str] = []
        self._frozen = False

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def get_or_intern(self, text: str) -> TextKey:
        key = self._keys.get(text)
        if key is not None:
            return key
        if self._frozen:
            raise RuntimeError(f"Cannot intern {text!r}: interner is frozen")
        key = len(self._texts)
        self._keys[text] = key
        self._texts.append(text)
        return key

    def lookup(self, text: str) -> TextKey | None:
        return self._keys.get(text)

    def resolve(self, key: TextKey) -> str:
        if key < 0 or key >= len(self._texts):
            raise KeyError(key)
        return self._texts[key]

    def freeze(self) -> None:
        self._frozen = True

    def __contains__(self, text: object) -> bool:
        return text in self._keys

    def __len__(self) -> int:
        return len(self._texts)

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "open"
        return f"Interner({len(self._texts)} texts, {state})"
