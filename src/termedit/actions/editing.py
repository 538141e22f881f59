"""Verbs that change the document text."""

from __future__ import annotations

from termedit.state import CommandResult, EditorState

from . import commands as cmd


def insert_char(state: EditorState, command: cmd.InsertChar) -> CommandResult:
    state.insert_text(state.cursor, command.char)
    return CommandResult(status="inserted")


def insert_newline(state: EditorState, command: cmd.InsertNewline) -> CommandResult:
    del command
    state.insert_text(state.cursor, "\n")
    return CommandResult(status="inserted")


def backspace(state: EditorState, command: cmd.Backspace) -> CommandResult:
    del command
    if state.cursor <= 0:
        return CommandResult(status="noop")
    state.delete_text(state.cursor - 1, 1)
    return CommandResult(status="deleted")


def cut_line(state: EditorState, command: cmd.Cut) -> CommandResult:
    """Move the cursor's line, newline included, into the clipboard."""

    del command
    buffer = state.buffer
    line = state.cursor_line
    content = buffer.line_content(line)
    state.clipboard.yank(content + "\n")

    start = buffer.line_to_char(line)
    if line < buffer.len_lines() - 1:
        state.delete_text(start, buffer.line_to_char(line + 1) - start)
    elif line > 0:
        # last line has no newline of its own; take the one before it
        state.delete_text(start - 1, buffer.len_chars() - start + 1)
    else:
        state.delete_text(0, buffer.len_chars())

    state.cursor = buffer.line_to_char(min(line, buffer.len_lines() - 1))
    return CommandResult(status="cut", message=content)


def copy_line(state: EditorState, command: cmd.Copy) -> CommandResult:
    del command
    content = state.buffer.line_content(state.cursor_line)
    state.clipboard.yank(content + "\n")
    return CommandResult(status="copied", message=content)


def paste_line(state: EditorState, command: cmd.Paste) -> CommandResult:
    """Insert the clipboard above the cursor's line."""

    del command
    if state.clipboard.empty:
        return CommandResult(status="noop")
    value = state.clipboard.get()
    assert value is not None
    start = state.buffer.line_to_char(state.cursor_line)
    state.insert_text(start, value.text)
    return CommandResult(status="pasted")


__all__ = [
    "insert_char",
    "insert_newline",
    "backspace",
    "cut_line",
    "copy_line",
    "paste_line",
]
