"""Tracking of document lines whose on-screen rows are stale."""

from __future__ import annotations

from typing import Iterable, List, Optional, Set


class DirtyLineSet:
    """Absolute line indices awaiting repaint.

    Besides individual lines the set can hold an open-ended mark meaning
    "this line and every line below it", which is what inserting or removing
    a newline does to the rest of the document.
    """

    def __init__(self, lines: Iterable[int] = ()) -> None:
        self._lines: Set[int] = set(lines)
        self._from: Optional[int] = None

    def __bool__(self) -> bool:
        return bool(self._lines) or self._from is not None

    def __contains__(self, line: object) -> bool:
        if not isinstance(line, int):
            return False
        if self._from is not None and line >= self._from:
            return True
        return line in self._lines

    def __repr__(self) -> str:
        return f"DirtyLineSet(lines={sorted(self._lines)!r}, from_line={self._from!r})"

    def mark(self, line: int) -> None:
        if line >= 0:
            self._lines.add(line)

    def mark_range(self, start: int, stop: int) -> None:
        self._lines.update(range(max(0, start), stop))

    def mark_from(self, line: int) -> None:
        line = max(0, line)
        if self._from is None or line < self._from:
            self._from = line

    def mark_all(self) -> None:
        self.mark_from(0)

    def resolve(self, start: int, stop: int) -> List[int]:
        """Dirty lines inside ``[start, stop)`` in ascending order."""

        return [line for line in range(start, stop) if line in self]

    def clear(self) -> None:
        self._lines.clear()
        self._from = None

    def drain(self, start: int, stop: int) -> List[int]:
        lines = self.resolve(start, stop)
        self.clear()
        return lines


__all__ = ["DirtyLineSet"]
