"""Built-in keymaps that seed each mode with sensible defaults."""

from __future__ import annotations

from typing import Iterable, Sequence

from termedit.actions import commands as cmd

from .models import Binding, KeyStroke
from .registry import KeymapRegistry

# Mode names match termedit.modes.InputMode values.
EDITING = "editing"
FINDING = "finding"
OPEN_FILE = "open_file"
SAVE_FILE = "save_file"


def _bind(binding_id: str, mode: str, token: str, command: cmd.Command, description: str) -> Binding:
    return Binding(
        id=binding_id,
        mode=mode,
        stroke=KeyStroke.parse(token),
        command=command,
        description=description,
        source="defaults",
    )


def _prompt_bindings(mode: str, confirm: cmd.Command, label: str) -> tuple[Binding, ...]:
    return (
        _bind(f"{mode}.confirm", mode, "ENTER", confirm, f"Confirm {label}"),
        _bind(f"{mode}.cancel", mode, "ESC", cmd.CancelPrompt(), f"Cancel {label}"),
    )


DEFAULT_BINDINGS: tuple[Binding, ...] = (
    _bind("editing.quit", EDITING, "ctrl+q", cmd.Quit(), "Quit the editor"),
    _bind("editing.undo", EDITING, "ctrl+z", cmd.Undo(), "Undo the last action"),
    _bind("editing.redo", EDITING, "ctrl+y", cmd.Redo(), "Redo the last undone action"),
    _bind("editing.find", EDITING, "ctrl+f", cmd.StartFind(), "Find text"),
    _bind("editing.open", EDITING, "ctrl+o", cmd.StartOpenFile(), "Open a file"),
    _bind("editing.save", EDITING, "ctrl+s", cmd.StartSaveFile(), "Save to a file"),
    _bind("editing.cut", EDITING, "ctrl+x", cmd.Cut(), "Cut the current line"),
    _bind("editing.copy", EDITING, "ctrl+c", cmd.Copy(), "Copy the current line"),
    _bind("editing.paste", EDITING, "ctrl+v", cmd.Paste(), "Paste above the current line"),
    _bind("editing.backspace", EDITING, "BACKSPACE", cmd.Backspace(), "Delete backwards"),
    _bind("editing.newline", EDITING, "ENTER", cmd.InsertNewline(), "Split the line"),
    _bind("editing.left", EDITING, "LEFT", cmd.MoveLeft(), "Cursor left"),
    _bind("editing.right", EDITING, "RIGHT", cmd.MoveRight(), "Cursor right"),
    _bind("editing.up", EDITING, "UP", cmd.MoveUp(), "Cursor up"),
    _bind("editing.down", EDITING, "DOWN", cmd.MoveDown(), "Cursor down"),
    _bind("editing.ctrl_left", EDITING, "ctrl+LEFT", cmd.MoveLeft(), "Cursor left"),
    _bind("editing.ctrl_right", EDITING, "ctrl+RIGHT", cmd.MoveRight(), "Cursor right"),
    _bind("editing.ctrl_up", EDITING, "ctrl+UP", cmd.MoveUp(), "Cursor up"),
    _bind("editing.ctrl_down", EDITING, "ctrl+DOWN", cmd.MoveDown(), "Cursor down"),
    *_prompt_bindings(FINDING, cmd.ConfirmFind(), "find"),
    *_prompt_bindings(OPEN_FILE, cmd.ConfirmOpenFile(), "open"),
    *_prompt_bindings(SAVE_FILE, cmd.ConfirmSaveFile(), "save"),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register the built-in bindings for every mode."""

    excluded = set(exclude_bindings or ())
    for binding in DEFAULT_BINDINGS:
        if binding.id in excluded:
            continue
        registry.register_binding(binding, replace=replace)

    if extra_bindings:
        for binding in extra_bindings:
            registry.register_binding(binding, replace=True)


__all__ = ["load_default_keymaps", "DEFAULT_BINDINGS"]
