"""Verbs driving the find and file-name prompts."""

from __future__ import annotations

from termedit.buffer import FileOperationError, open_file, save_file
from termedit.modes.prompt import InputMode
from termedit.runtime import telemetry
from termedit.state import CommandResult, EditorState

from . import commands as cmd


def start_find(state: EditorState, command: cmd.StartFind) -> CommandResult:
    del command
    if state.prompt.confirmed_find_term is not None:
        state.mark_visible()
    state.prompt.start(InputMode.FINDING)
    return CommandResult(status="prompt", message="find")


def confirm_find(state: EditorState, command: cmd.ConfirmFind) -> CommandResult:
    del command
    term = state.prompt.find_input
    state.prompt.confirmed_find_term = term or None
    state.prompt.finish()
    state.mark_visible()
    if not term:
        return CommandResult(status="find_cleared")
    matches = state.buffer.text.count(term)
    state.status_message = f"{matches} match{'es' if matches != 1 else ''} for '{term}'"
    return CommandResult(status="find", message=term)


def cancel_prompt(state: EditorState, command: cmd.CancelPrompt) -> CommandResult:
    del command
    if state.prompt.mode is InputMode.FINDING:
        state.prompt.confirmed_find_term = None
        state.mark_visible()
    state.prompt.finish()
    return CommandResult(status="cancelled")


def start_open_file(state: EditorState, command: cmd.StartOpenFile) -> CommandResult:
    del command
    state.prompt.start(InputMode.OPEN_FILE)
    return CommandResult(status="prompt", message="open")


def start_save_file(state: EditorState, command: cmd.StartSaveFile) -> CommandResult:
    del command
    state.prompt.start(InputMode.SAVE_FILE)
    return CommandResult(status="prompt", message="save")


def confirm_open_file(state: EditorState, command: cmd.ConfirmOpenFile) -> CommandResult:
    del command
    path = state.prompt.filename_input
    state.prompt.finish()
    if not path:
        return _file_error(state, "open", "No file name given")
    try:
        buffer = open_file(path)
    except FileOperationError as exc:
        return _file_error(state, "open", str(exc))
    state.replace_buffer(buffer, path=path)
    state.status_message = f"Opened {path} ({buffer.len_lines()} lines)"
    return CommandResult(status="opened", message=path)


def confirm_save_file(state: EditorState, command: cmd.ConfirmSaveFile) -> CommandResult:
    del command
    path = state.prompt.filename_input
    state.prompt.finish()
    if not path:
        return _file_error(state, "save", "No file name given")
    try:
        written = save_file(path, state.buffer)
    except FileOperationError as exc:
        return _file_error(state, "save", str(exc))
    state.path = path
    state.status_message = f"Wrote {written} characters to {path}"
    return CommandResult(status="saved", message=path)


def _file_error(state: EditorState, operation: str, message: str) -> CommandResult:
    telemetry.record_event(
        "file_error",
        level="warning",
        data={"operation": operation, "message": message},
    )
    state.status_message = message
    return CommandResult(status="file_error", message=message)


__all__ = [
    "start_find",
    "confirm_find",
    "cancel_prompt",
    "start_open_file",
    "start_save_file",
    "confirm_open_file",
    "confirm_save_file",
]
