"""Abstract editor commands produced by the input layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class Quit:
    pass


@dataclass(frozen=True, slots=True)
class InsertChar:
    char: str

    def __post_init__(self) -> None:
        if len(self.char) != 1:
            raise ValueError("InsertChar takes exactly one character")


@dataclass(frozen=True, slots=True)
class InsertNewline:
    pass


@dataclass(frozen=True, slots=True)
class Backspace:
    pass


@dataclass(frozen=True, slots=True)
class MoveLeft:
    pass


@dataclass(frozen=True, slots=True)
class MoveRight:
    pass


@dataclass(frozen=True, slots=True)
class MoveUp:
    pass


@dataclass(frozen=True, slots=True)
class MoveDown:
    pass


@dataclass(frozen=True, slots=True)
class Undo:
    pass


@dataclass(frozen=True, slots=True)
class Redo:
    pass


@dataclass(frozen=True, slots=True)
class StartFind:
    pass


@dataclass(frozen=True, slots=True)
class ConfirmFind:
    pass


@dataclass(frozen=True, slots=True)
class StartOpenFile:
    pass


@dataclass(frozen=True, slots=True)
class ConfirmOpenFile:
    pass


@dataclass(frozen=True, slots=True)
class StartSaveFile:
    pass


@dataclass(frozen=True, slots=True)
class ConfirmSaveFile:
    pass


@dataclass(frozen=True, slots=True)
class CancelPrompt:
    pass


@dataclass(frozen=True, slots=True)
class Cut:
    pass


@dataclass(frozen=True, slots=True)
class Copy:
    pass


@dataclass(frozen=True, slots=True)
class Paste:
    pass


Command = Union[
    Quit,
    InsertChar,
    InsertNewline,
    Backspace,
    MoveLeft,
    MoveRight,
    MoveUp,
    MoveDown,
    Undo,
    Redo,
    StartFind,
    ConfirmFind,
    StartOpenFile,
    ConfirmOpenFile,
    StartSaveFile,
    ConfirmSaveFile,
    CancelPrompt,
    Cut,
    Copy,
    Paste,
]


def command_name(command: object) -> str:
    return type(command).__name__


__all__ = [
    "Command",
    "command_name",
    "Quit",
    "InsertChar",
    "InsertNewline",
    "Backspace",
    "MoveLeft",
    "MoveRight",
    "MoveUp",
    "MoveDown",
    "Undo",
    "Redo",
    "StartFind",
    "ConfirmFind",
    "StartOpenFile",
    "ConfirmOpenFile",
    "StartSaveFile",
    "ConfirmSaveFile",
    "CancelPrompt",
    "Cut",
    "Copy",
    "Paste",
]
