"""Normalized key events shared by every front end."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from termedit.keymaps import KeyStroke

_TEXT_BLOCKING_MODIFIERS = frozenset({"ctrl", "alt"})


@dataclass(slots=True)
class KeyInput:
    """Normalized key event passed to the input handler.

    Named keys use upper-case names (``ENTER``, ``LEFT``); printable keys use
    the character itself and carry it in ``text``.
    """

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None

    @property
    def printable(self) -> bool:
        if self.text is None or len(self.text) != 1 or not self.text.isprintable():
            return False
        mods = {modifier.lower() for modifier in self.modifiers}
        return not (mods & _TEXT_BLOCKING_MODIFIERS)


def key_to_token(key: KeyInput) -> str:
    return KeyStroke(key.key, key.modifiers).token


__all__ = ["KeyInput", "key_to_token"]
