"""Decoding of raw terminal input into normalized key events."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from termedit.modes import KeyInput

ESC = "\x1b"

# Escape sequences without the leading ESC.
SEQUENCES: Dict[str, Tuple[str, Tuple[str, ...]]] = {
    "[A": ("UP", ()),
    "[B": ("DOWN", ()),
    "[C": ("RIGHT", ()),
    "[D": ("LEFT", ()),
    # SS3, application cursor mode
    "OA": ("UP", ()),
    "OB": ("DOWN", ()),
    "OC": ("RIGHT", ()),
    "OD": ("LEFT", ()),
    "[1;5A": ("UP", ("ctrl",)),
    "[1;5B": ("DOWN", ("ctrl",)),
    "[1;5C": ("RIGHT", ("ctrl",)),
    "[1;5D": ("LEFT", ("ctrl",)),
    "[1;3A": ("UP", ("alt",)),
    "[1;3B": ("DOWN", ("alt",)),
    "[1;3C": ("RIGHT", ("alt",)),
    "[1;3D": ("LEFT", ("alt",)),
    "[H": ("HOME", ()),
    "[F": ("END", ()),
    "[1~": ("HOME", ()),
    "[4~": ("END", ()),
    "[3~": ("DELETE", ()),
    "[5~": ("PAGE_UP", ()),
    "[6~": ("PAGE_DOWN", ()),
}

SIMPLE_KEYS: Dict[str, str] = {
    "\r": "ENTER",
    "\n": "ENTER",
    "\t": "TAB",
    "\x7f": "BACKSPACE",
    "\x08": "BACKSPACE",
}


class KeyDecoder:
    """Incremental decoder; escape sequences may arrive split across reads.

    ``feed`` keeps an unfinished escape sequence pending until more input
    arrives. ``flush`` resolves whatever is pending, so a lone ESC that is
    not followed by anything becomes an ``ESC`` key.
    """

    def __init__(self) -> None:
        self._pending = ""

    @property
    def pending(self) -> bool:
        return bool(self._pending)

    def feed(self, data: str) -> List[KeyInput]:
        self._pending += data
        keys: List[KeyInput] = []
        while self._pending:
            key, consumed = self._next()
            if consumed == 0:
                break
            self._pending = self._pending[consumed:]
            if key is not None:
                keys.append(key)
        return keys

    def flush(self) -> List[KeyInput]:
        if not self._pending:
            return []
        rest = self._pending[1:] if self._pending.startswith(ESC) else self._pending
        self._pending = ""
        return [KeyInput("ESC"), *self.feed(rest)]

    def _next(self) -> Tuple[Optional[KeyInput], int]:
        char = self._pending[0]
        if char in SIMPLE_KEYS:
            return KeyInput(SIMPLE_KEYS[char]), 1
        if char == ESC:
            return self._escape()
        code = ord(char)
        if 1 <= code <= 26:
            return KeyInput(chr(code + 96), ("ctrl",)), 1
        if char.isprintable():
            return KeyInput(char, text=char), 1
        # unknown control character
        return None, 1

    def _escape(self) -> Tuple[Optional[KeyInput], int]:
        rest = self._pending[1:]
        if not rest:
            return None, 0
        if rest[0] == ESC:
            return KeyInput("ESC"), 1
        if rest[0] not in "[O":
            return KeyInput(rest[0], ("alt",), text=rest[0]), 2
        for index in range(1, len(rest)):
            char = rest[index]
            if char.isalpha() or char == "~":
                named = SEQUENCES.get(rest[: index + 1])
                key = KeyInput(named[0], named[1]) if named else None
                return key, index + 2
        return None, 0


__all__ = ["KeyDecoder", "SEQUENCES", "SIMPLE_KEYS"]
