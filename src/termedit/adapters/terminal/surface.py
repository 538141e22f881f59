"""Surface that paints rows with ANSI escape sequences."""

from __future__ import annotations

from typing import Sequence, TextIO

from termedit.render import Segment

CSI = "\x1b["
REVERSE = f"{CSI}7m"
RESET = f"{CSI}0m"
CLEAR_LINE = f"{CSI}2K"
HIDE_CURSOR = f"{CSI}?25l"
SHOW_CURSOR = f"{CSI}?25h"


def move_to(row: int, column: int) -> str:
    """Cursor move for 0-based ``row``/``column`` (ANSI is 1-based)."""

    return f"{CSI}{row + 1};{column + 1}H"


class AnsiSurface:
    """Buffers escape sequences and writes them to ``stream`` on ``flush``."""

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream
        self._chunks: list[str] = []
        self._cursor_visible: bool | None = None

    def write_row(self, row: int, segments: Sequence[Segment]) -> None:
        self._chunks.append(move_to(row, 0) + CLEAR_LINE)
        for segment in segments:
            if segment.reverse:
                self._chunks.append(f"{REVERSE}{segment.text}{RESET}")
            else:
                self._chunks.append(segment.text)

    def move_cursor(self, row: int, column: int) -> None:
        self._chunks.append(move_to(row, column))

    def set_cursor_visible(self, visible: bool) -> None:
        if visible == self._cursor_visible:
            return
        self._cursor_visible = visible
        self._chunks.append(SHOW_CURSOR if visible else HIDE_CURSOR)

    def flush(self) -> None:
        if self._chunks:
            self.stream.write("".join(self._chunks))
            self._chunks.clear()
        self.stream.flush()


__all__ = ["AnsiSurface", "move_to"]
