"""Command -> verb table."""

from __future__ import annotations

from typing import Any, Callable, Dict, Type

from termedit.state import CommandResult, EditorState

from . import commands as cmd
from . import editing, history, motion, prompts

CommandHandler = Callable[[EditorState, Any], CommandResult]


def _quit(state: EditorState, command: cmd.Quit) -> CommandResult:
    del state, command
    return CommandResult(status="quit", quit=True)


COMMAND_HANDLERS: Dict[Type[object], CommandHandler] = {
    cmd.Quit: _quit,
    cmd.InsertChar: editing.insert_char,
    cmd.InsertNewline: editing.insert_newline,
    cmd.Backspace: editing.backspace,
    cmd.Cut: editing.cut_line,
    cmd.Copy: editing.copy_line,
    cmd.Paste: editing.paste_line,
    cmd.MoveLeft: motion.move_left,
    cmd.MoveRight: motion.move_right,
    cmd.MoveUp: motion.move_up,
    cmd.MoveDown: motion.move_down,
    cmd.Undo: history.undo,
    cmd.Redo: history.redo,
    cmd.StartFind: prompts.start_find,
    cmd.ConfirmFind: prompts.confirm_find,
    cmd.CancelPrompt: prompts.cancel_prompt,
    cmd.StartOpenFile: prompts.start_open_file,
    cmd.ConfirmOpenFile: prompts.confirm_open_file,
    cmd.StartSaveFile: prompts.start_save_file,
    cmd.ConfirmSaveFile: prompts.confirm_save_file,
}


def dispatch(state: EditorState, command: object) -> CommandResult:
    handler = COMMAND_HANDLERS.get(type(command))
    if handler is None:
        return CommandResult(consumed=False, status="unhandled", message=repr(command))
    return handler(state, command)


__all__ = ["COMMAND_HANDLERS", "CommandHandler", "dispatch"]
