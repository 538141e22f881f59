"""Character-indexed text storage with line translation."""

from __future__ import annotations

from bisect import bisect_right
from typing import Iterator, List, Tuple

Position = Tuple[int, int]  # (line, column)


class BufferRangeError(ValueError):
    """Raised when a caller addresses an offset or line outside the buffer."""

    def __init__(self, message: str, *, offset: int | None = None) -> None:
        super().__init__(message)
        self.offset = offset


class TextBuffer:
    """Mutable text addressed by character offset.

    Text is kept as a list of lines, each carrying its terminating ``\\n``
    (the last line never has one), next to the character offset at which
    each line starts. Offset/line translation bisects the start table; a
    mutation re-splits only the lines it touches and re-derives the start
    table from the first touched line onwards.
    """

    def __init__(self) -> None:
        self._lines: List[str] = [""]
        self._starts: List[int] = [0]
        self._length = 0

    @classmethod
    def from_text(cls, text: str) -> "TextBuffer":
        buffer = cls()
        buffer._lines = _split_lines(text, keep_last=True)
        buffer._reindex(0)
        return buffer

    @property
    def text(self) -> str:
        return "".join(self._lines)

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    def len_chars(self) -> int:
        return self._length

    def len_lines(self) -> int:
        return len(self._lines)

    # -- mutation -----------------------------------------------------------

    def insert(self, offset: int, text: str) -> None:
        if offset < 0 or offset > self._length:
            raise BufferRangeError(
                f"Insert offset {offset} outside [0, {self._length}]", offset=offset
            )
        if not text:
            return
        line = self.char_to_line(offset)
        column = offset - self._starts[line]
        self._splice(line, line, column, column, text)

    def delete(self, offset: int, length: int) -> str:
        """Remove up to ``length`` characters at ``offset`` and return them.

        Spans that are empty or start outside the buffer remove nothing.
        """

        if length <= 0 or offset < 0 or offset >= self._length:
            return ""
        end = min(offset + length, self._length)
        first = self.char_to_line(offset)
        last = self.char_to_line(end)
        base = self._starts[first]
        return self._splice(first, last, offset - base, end - base, "")

    def _splice(
        self, first: int, last: int, local_start: int, local_end: int, text: str
    ) -> str:
        merged = "".join(self._lines[first : last + 1])
        removed = merged[local_start:local_end]
        updated = merged[:local_start] + text + merged[local_end:]
        keep_last = last == len(self._lines) - 1
        self._lines[first : last + 1] = _split_lines(updated, keep_last=keep_last)
        self._reindex(first)
        return removed

    def _reindex(self, first: int) -> None:
        del self._starts[first:]
        running = self._starts[first - 1] + len(self._lines[first - 1]) if first else 0
        for line in self._lines[first:]:
            self._starts.append(running)
            running += len(line)
        self._length = running

    # -- translation ----------------------------------------------------------

    def char_to_line(self, offset: int) -> int:
        if offset < 0 or offset > self._length:
            raise BufferRangeError(
                f"Offset {offset} outside [0, {self._length}]", offset=offset
            )
        return bisect_right(self._starts, offset) - 1

    def line_to_char(self, line: int) -> int:
        if line == len(self._lines):
            return self._length
        self._check_line(line)
        return self._starts[line]

    def position(self, offset: int) -> Position:
        line = self.char_to_line(offset)
        return line, offset - self._starts[line]

    def offset_for(self, line: int, column: int) -> int:
        """Offset of ``column`` on ``line``, clamped to the line's content."""

        self._check_line(line)
        column = max(0, min(column, len(self.line_content(line))))
        return self._starts[line] + column

    # -- reading ------------------------------------------------------------

    def line(self, line: int) -> str:
        self._check_line(line)
        return self._lines[line]

    def line_content(self, line: int) -> str:
        text = self.line(line)
        return text[:-1] if text.endswith("\n") else text

    def slice(self, start: int = 0, end: int | None = None) -> str:
        stop = self._length if end is None else end
        if start < 0 or stop > self._length or start > stop:
            raise BufferRangeError(
                f"Slice [{start}, {stop}) outside [0, {self._length}]", offset=start
            )
        if start == stop:
            return ""
        first = self.char_to_line(start)
        last = self.char_to_line(stop)
        base = self._starts[first]
        return "".join(self._lines[first : last + 1])[start - base : stop - base]

    def _check_line(self, line: int) -> None:
        if line < 0 or line >= len(self._lines):
            raise BufferRangeError(
                f"Line {line} outside [0, {len(self._lines)})", offset=None
            )


def _split_lines(text: str, *, keep_last: bool) -> List[str]:
    """Split on ``\\n`` only, keeping terminators.

    The trailing remainder is kept when it is the document's last line, even
    if empty; otherwise the text always ends with a newline and nothing
    follows it.
    """

    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if keep_last:
        lines.append(parts[-1])
    return lines


__all__ = ["TextBuffer", "BufferRangeError", "Position"]
