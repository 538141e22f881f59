"""Editor state owned by the command loop and the result of one command."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from termedit.buffer import (
    Clipboard,
    Delete,
    EditHistory,
    HistoryOutcome,
    Insert,
    Position,
    TextBuffer,
    clamp_offset,
)
from termedit.modes.prompt import PromptState
from termedit.render import DirtyLineSet, ViewportModel

DEFAULT_MAX_LINES = 22  # 24-row terminal minus banner and status line


@dataclass(slots=True)
class CommandResult:
    """Result returned from applying one command."""

    consumed: bool = True
    status: str = "ok"
    message: Optional[str] = None
    quit: bool = False


@dataclass
class EditorState:
    """Everything one editing session mutates.

    Edits go through ``insert_text``/``delete_text`` so the buffer change,
    the history record and the dirty marking always happen together.
    """

    buffer: TextBuffer = field(default_factory=TextBuffer)
    history: EditHistory = field(default_factory=EditHistory)
    viewport: ViewportModel = field(
        default_factory=lambda: ViewportModel(max_lines=DEFAULT_MAX_LINES)
    )
    dirty: DirtyLineSet = field(default_factory=DirtyLineSet)
    prompt: PromptState = field(default_factory=PromptState)
    clipboard: Clipboard = field(default_factory=Clipboard)
    cursor: int = 0
    status_message: str = ""
    path: Optional[str] = None

    @property
    def cursor_line(self) -> int:
        return self.buffer.char_to_line(clamp_offset(self.buffer, self.cursor))

    @property
    def cursor_position(self) -> Position:
        return self.buffer.position(clamp_offset(self.buffer, self.cursor))

    def insert_text(self, offset: int, text: str) -> None:
        if not text:
            return
        offset = clamp_offset(self.buffer, offset)
        self.buffer.insert(offset, text)
        self.history.record(Insert(offset, text), cursor=self.cursor)
        self._mark_edit(offset, text)
        self.cursor = offset + len(text)

    def delete_text(self, offset: int, length: int) -> str:
        removed = self.buffer.delete(offset, length)
        if not removed:
            return ""
        self.history.record(Delete(offset, removed), cursor=self.cursor)
        self._mark_edit(offset, removed)
        self.cursor = offset
        return removed

    def apply_outcome(self, outcome: HistoryOutcome) -> None:
        if outcome.multiline and outcome.lines:
            self.dirty.mark_from(min(outcome.lines))
        else:
            for line in outcome.lines:
                self.dirty.mark(line)
        self.cursor = clamp_offset(self.buffer, outcome.cursor)

    def replace_buffer(self, buffer: TextBuffer, *, path: Optional[str] = None) -> None:
        """Swap in a new document, discarding history and scroll position."""

        self.buffer = buffer
        self.history.clear()
        self.cursor = 0
        self.viewport.reset()
        self.dirty.mark_all()
        if path is not None:
            self.path = path

    def mark_visible(self) -> None:
        visible = self.viewport.visible_range()
        self.dirty.mark_range(visible.start, visible.stop)

    def _mark_edit(self, offset: int, text: str) -> None:
        line = self.buffer.char_to_line(clamp_offset(self.buffer, offset))
        if "\n" in text:
            self.dirty.mark_from(line)
        else:
            self.dirty.mark(line)


__all__ = ["EditorState", "CommandResult", "DEFAULT_MAX_LINES"]
