"""Undo and redo verbs."""

from __future__ import annotations

from termedit.state import CommandResult, EditorState

from . import commands as cmd


def undo(state: EditorState, command: cmd.Undo) -> CommandResult:
    del command
    outcome = state.history.undo(state.buffer)
    if outcome is None:
        return CommandResult(status="noop", message="Nothing to undo")
    state.apply_outcome(outcome)
    return CommandResult(status="undone")


def redo(state: EditorState, command: cmd.Redo) -> CommandResult:
    del command
    outcome = state.history.redo(state.buffer)
    if outcome is None:
        return CommandResult(status="noop", message="Nothing to redo")
    state.apply_outcome(outcome)
    return CommandResult(status="redone")


__all__ = ["undo", "redo"]
