"""Clipboard storage for line cut/copy/paste."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional


@dataclass(slots=True)
class ClipboardValue:
    text: str
    type: str = "line"  # only whole lines are yanked today


class Clipboard:
    """Single-slot register holding the last cut or copied line.

    ``on_yank`` lets a host mirror yanks into the platform clipboard.
    """

    def __init__(self, *, on_yank: Optional[Callable[[str], None]] = None) -> None:
        self._value: Optional[ClipboardValue] = None
        self.on_yank = on_yank

    @property
    def empty(self) -> bool:
        return self._value is None or not self._value.text

    def get(self) -> Optional[ClipboardValue]:
        return self._value

    def yank(self, text: str, *, register_type: str = "line") -> None:
        self._value = ClipboardValue(text=text, type=register_type)
        if self.on_yank is not None:
            self.on_yank(text)


__all__ = ["Clipboard", "ClipboardValue"]
