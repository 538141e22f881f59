"""Cursor motion verbs. Motion never dirties lines; the cursor is drawn separately."""

from __future__ import annotations

from termedit.state import CommandResult, EditorState

from . import commands as cmd


def move_left(state: EditorState, command: cmd.MoveLeft) -> CommandResult:
    del command
    if state.cursor <= 0:
        return CommandResult(status="noop")
    state.cursor -= 1
    return CommandResult(status="moved")


def move_right(state: EditorState, command: cmd.MoveRight) -> CommandResult:
    del command
    if state.cursor >= state.buffer.len_chars():
        return CommandResult(status="noop")
    state.cursor += 1
    return CommandResult(status="moved")


def move_up(state: EditorState, command: cmd.MoveUp) -> CommandResult:
    del command
    line, column = state.cursor_position
    if line == 0:
        return CommandResult(status="noop")
    state.cursor = state.buffer.offset_for(line - 1, column)
    return CommandResult(status="moved")


def move_down(state: EditorState, command: cmd.MoveDown) -> CommandResult:
    del command
    line, column = state.cursor_position
    if line + 1 >= state.buffer.len_lines():
        return CommandResult(status="noop")
    state.cursor = state.buffer.offset_for(line + 1, column)
    return CommandResult(status="moved")


__all__ = ["move_left", "move_right", "move_up", "move_down"]
