"""Dataclasses describing key bindings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from termedit.actions.commands import Command


def _normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """Single normalized key press."""

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "modifiers", _normalize_modifiers(self.modifiers))

    @property
    def token(self) -> str:
        if self.modifiers:
            modifier = "+".join(self.modifiers)
            return f"{modifier}+{self.key}"
        return self.key

    @classmethod
    def parse(cls, token: str) -> "KeyStroke":
        """Build a stroke from ``"ctrl+q"``-style text; the key is the last part."""

        parts = token.split("+")
        if len(parts) > 1 and parts[-1] == "":
            # "ctrl++" binds the plus key itself
            parts = parts[:-2] + ["+"]
        return cls(parts[-1], tuple(parts[:-1]))


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates a key stroke in one mode with the command it produces."""

    id: str
    mode: str
    stroke: KeyStroke
    command: Command
    description: str = ""
    source: str | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.mode:
            raise ValueError("binding mode cannot be empty")

    @property
    def key_signature(self) -> str:
        return self.stroke.token


__all__ = ["KeyStroke", "Binding"]
