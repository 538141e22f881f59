"""In-memory surface whose rows are rendered as rich ``Text``."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from rich.text import Text

from termedit.render import RowImage, Segment

CURSOR_STYLE = "reverse"


class RowSurface:
    """Keeps the painted rows so a widget can draw them on refresh."""

    def __init__(self, rows: int) -> None:
        self.rows: List[RowImage] = [() for _ in range(rows)]
        self.cursor: Tuple[int, int] = (0, 0)
        self.cursor_visible = True
        self.writes = 0
        self.flushes = 0

    def write_row(self, row: int, segments: Sequence[Segment]) -> None:
        if row >= len(self.rows):
            self.rows.extend(() for _ in range(row + 1 - len(self.rows)))
        self.rows[row] = tuple(segments)
        self.writes += 1

    def move_cursor(self, row: int, column: int) -> None:
        self.cursor = (row, column)

    def set_cursor_visible(self, visible: bool) -> None:
        self.cursor_visible = visible

    def flush(self) -> None:
        self.flushes += 1

    def row_text(self, row: int) -> Text:
        line = Text(no_wrap=True, end="")
        for segment in self.rows[row]:
            line.append(segment.text, style="reverse" if segment.reverse else None)
        cursor_row, cursor_column = self.cursor
        if self.cursor_visible and row == cursor_row:
            if len(line.plain) <= cursor_column:
                line.pad_right(cursor_column + 1 - len(line.plain))
            line.stylize(CURSOR_STYLE, cursor_column, cursor_column + 1)
        return line

    def to_text(self) -> Text:
        return Text("\n", no_wrap=True).join(
            self.row_text(row) for row in range(len(self.rows))
        )


__all__ = ["RowSurface", "CURSOR_STYLE"]
