"""Row images and the cache of what is currently painted."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple


@dataclass(frozen=True, slots=True)
class Segment:
    """A run of text painted with one style."""

    text: str
    reverse: bool = False


RowImage = Tuple[Segment, ...]


def make_row(segments: Iterable[Segment]) -> RowImage:
    """Normalize segments: drop empty runs and merge neighbours of equal style."""

    merged: List[Segment] = []
    for segment in segments:
        if not segment.text:
            continue
        if merged and merged[-1].reverse == segment.reverse:
            merged[-1] = Segment(merged[-1].text + segment.text, segment.reverse)
        else:
            merged.append(segment)
    return tuple(merged)


def row_text(row: RowImage) -> str:
    return "".join(segment.text for segment in row)


class VirtualScreen:
    """Exact row image last painted at each visible row.

    ``None`` means the row's content is unknown and must be painted.
    """

    def __init__(self, rows: int) -> None:
        self._rows: List[Optional[RowImage]] = [None] * rows

    def __len__(self) -> int:
        return len(self._rows)

    def get(self, index: int) -> Optional[RowImage]:
        if 0 <= index < len(self._rows):
            return self._rows[index]
        return None

    def matches(self, index: int, image: RowImage) -> bool:
        return self.get(index) == image

    def update(self, index: int, image: RowImage) -> None:
        if 0 <= index < len(self._rows):
            self._rows[index] = image

    def invalidate(self) -> None:
        self._rows = [None] * len(self._rows)

    def resize(self, rows: int) -> None:
        self._rows = (self._rows + [None] * rows)[:rows]

    def snapshot(self) -> Tuple[str, ...]:
        return tuple(row_text(row) if row else "" for row in self._rows)


__all__ = ["Segment", "RowImage", "make_row", "row_text", "VirtualScreen"]
