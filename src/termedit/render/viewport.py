"""Scrolled window of visible document lines."""

from __future__ import annotations

from dataclasses import dataclass

# One row for the banner, one for the status/prompt line.
RESERVED_ROWS = 2


@dataclass(slots=True)
class ViewportModel:
    max_lines: int
    viewport_row: int = 0

    def __post_init__(self) -> None:
        if self.max_lines < 1:
            raise ValueError("max_lines must be positive")

    @classmethod
    def from_terminal_rows(cls, rows: int) -> "ViewportModel":
        return cls(max_lines=max(1, rows - RESERVED_ROWS))

    def reconcile(self, cursor_line: int) -> bool:
        """Scroll so ``cursor_line`` is visible; return whether we scrolled."""

        previous = self.viewport_row
        if cursor_line < self.viewport_row:
            self.viewport_row = cursor_line
        elif cursor_line >= self.viewport_row + self.max_lines:
            self.viewport_row = cursor_line - self.max_lines + 1
        return self.viewport_row != previous

    def visible_range(self) -> range:
        return range(self.viewport_row, self.viewport_row + self.max_lines)

    def contains(self, line: int) -> bool:
        return self.viewport_row <= line < self.viewport_row + self.max_lines

    def screen_row(self, line: int) -> int:
        return line - self.viewport_row

    def reset(self) -> None:
        self.viewport_row = 0


__all__ = ["ViewportModel", "RESERVED_ROWS"]
