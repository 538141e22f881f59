"""Undo/redo history with time-windowed coalescing of edits."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Union

from termedit.runtime import telemetry

from .text import TextBuffer

Clock = Callable[[], float]

DEFAULT_COALESCE_WINDOW = 0.2  # seconds


@dataclass(frozen=True, slots=True)
class Insert:
    offset: int
    text: str


@dataclass(frozen=True, slots=True)
class Delete:
    offset: int
    text: str


EditOp = Union[Insert, Delete]


@dataclass(slots=True)
class EditAction:
    """Ops recorded within one coalescing window.

    ``cursor_before`` is where the cursor sat before the first op, which is
    where undo puts it back.
    """

    ops: List[EditOp]
    timestamp: float
    cursor_before: Optional[int] = None


@dataclass(slots=True)
class HistoryOutcome:
    """Cursor hint and touched lines after an undo or redo."""

    cursor: int
    lines: set[int] = field(default_factory=set)
    multiline: bool = False


class EditHistory:
    """Undo and redo stacks of grouped edit operations.

    Edits arriving within ``window`` seconds of the previous one extend the
    action on top of the undo stack, so a burst of typing undoes in one step.
    """

    def __init__(
        self,
        *,
        window: float = DEFAULT_COALESCE_WINDOW,
        clock: Clock = time.monotonic,
        max_actions: Optional[int] = None,
    ) -> None:
        self.window = window
        self._clock = clock
        self._max_actions = max_actions
        self._undo: List[EditAction] = []
        self._redo: List[EditAction] = []
        self._sealed = False

    @property
    def undo_depth(self) -> int:
        return len(self._undo)

    @property
    def redo_depth(self) -> int:
        return len(self._redo)

    def can_undo(self) -> bool:
        return bool(self._undo)

    def can_redo(self) -> bool:
        return bool(self._redo)

    def clear(self) -> None:
        self._undo.clear()
        self._redo.clear()
        self._sealed = False

    def seal(self) -> None:
        """Make the next recorded op start a new action regardless of timing."""

        self._sealed = True

    def record(self, op: EditOp, *, cursor: Optional[int] = None) -> None:
        """Add ``op``; ``cursor`` is the position before it was applied."""

        now = self._clock()
        self._redo.clear()
        sealed, self._sealed = self._sealed, False
        if self._undo and not sealed:
            last = self._undo[-1]
            if now - last.timestamp < self.window:
                last.ops.append(op)
                last.timestamp = now
                return
        self._undo.append(EditAction(ops=[op], timestamp=now, cursor_before=cursor))
        if self._max_actions is not None and len(self._undo) > self._max_actions:
            del self._undo[0]

    def undo(self, buffer: TextBuffer) -> Optional[HistoryOutcome]:
        if not self._undo:
            return None
        action = self._undo.pop()
        with telemetry.span(
            "history::undo",
            component="history",
            metadata={"ops": len(action.ops)},
        ):
            outcome = HistoryOutcome(cursor=0)
            for op in reversed(action.ops):
                if isinstance(op, Insert):
                    buffer.delete(op.offset, len(op.text))
                    outcome.cursor = op.offset
                else:
                    buffer.insert(op.offset, op.text)
                    outcome.cursor = op.offset + len(op.text)
                _touch(outcome, buffer, op)
            if action.cursor_before is not None:
                outcome.cursor = action.cursor_before
        self._redo.append(action)
        self._sealed = True
        return outcome

    def redo(self, buffer: TextBuffer) -> Optional[HistoryOutcome]:
        if not self._redo:
            return None
        action = self._redo.pop()
        with telemetry.span(
            "history::redo",
            component="history",
            metadata={"ops": len(action.ops)},
        ):
            outcome = HistoryOutcome(cursor=0)
            for op in action.ops:
                if isinstance(op, Insert):
                    buffer.insert(op.offset, op.text)
                    outcome.cursor = op.offset + len(op.text)
                else:
                    buffer.delete(op.offset, len(op.text))
                    outcome.cursor = op.offset
                _touch(outcome, buffer, op)
        self._undo.append(action)
        self._sealed = True
        return outcome


def _touch(outcome: HistoryOutcome, buffer: TextBuffer, op: EditOp) -> None:
    outcome.lines.add(buffer.char_to_line(min(op.offset, buffer.len_chars())))
    if "\n" in op.text:
        outcome.multiline = True


__all__ = [
    "Clock",
    "DEFAULT_COALESCE_WINDOW",
    "Insert",
    "Delete",
    "EditOp",
    "EditAction",
    "EditHistory",
    "HistoryOutcome",
]
