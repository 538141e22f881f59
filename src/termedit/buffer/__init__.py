"""Text storage, edit history, clipboard and persistence."""

from .files import FileOperationError, open_file, save_file
from .history import (
    Delete,
    EditAction,
    EditHistory,
    EditOp,
    HistoryOutcome,
    Insert,
)
from .registers import Clipboard, ClipboardValue
from .text import BufferRangeError, Position, TextBuffer
from .validation import clamp_offset

__all__ = [
    "TextBuffer",
    "BufferRangeError",
    "Position",
    "Insert",
    "Delete",
    "EditOp",
    "EditAction",
    "EditHistory",
    "HistoryOutcome",
    "Clipboard",
    "ClipboardValue",
    "FileOperationError",
    "open_file",
    "save_file",
    "clamp_offset",
]
