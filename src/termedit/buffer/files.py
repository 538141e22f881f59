"""Whole-document persistence."""

from __future__ import annotations

from pathlib import Path
from typing import Union

from termedit.runtime import telemetry

from .text import TextBuffer

PathLike = Union[str, Path]

ENCODING = "utf-8"


class FileOperationError(RuntimeError):
    """Raised when a document cannot be read or written."""

    def __init__(self, message: str, *, path: PathLike, operation: str) -> None:
        super().__init__(message)
        self.path = str(path)
        self.operation = operation


def open_file(path: PathLike) -> TextBuffer:
    """Read ``path`` into a fresh buffer, keeping its line endings as they are."""

    target = Path(path)
    with telemetry.span(
        "files::open", component="files", metadata={"path": str(target)}
    ):
        try:
            with target.open(encoding=ENCODING, newline="") as handle:
                content = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise FileOperationError(
                f"Could not open {target}: {_describe(exc)}",
                path=target,
                operation="open",
            ) from exc
        return TextBuffer.from_text(content)


def save_file(path: PathLike, buffer: TextBuffer) -> int:
    """Overwrite ``path`` with the buffer's full text; returns characters written."""

    target = Path(path)
    with telemetry.span(
        "files::save", component="files", metadata={"path": str(target)}
    ):
        text = buffer.text
        try:
            with target.open("w", encoding=ENCODING, newline="") as handle:
                handle.write(text)
        except OSError as exc:
            raise FileOperationError(
                f"Could not save {target}: {_describe(exc)}",
                path=target,
                operation="save",
            ) from exc
        return len(text)


def _describe(exc: Exception) -> str:
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc)


__all__ = ["FileOperationError", "open_file", "save_file", "ENCODING"]
