"""Translation of key events into editor commands, per input mode."""

from __future__ import annotations

from typing import Optional

from termedit.actions.commands import Command, InsertChar
from termedit.keymaps import KeymapRegistry, load_default_keymaps

from .base import KeyInput, key_to_token
from .prompt import InputMode, PromptState


class InputHandler:
    """Owns the prompt state and decides what each key means.

    In editing mode unbound printable keys insert themselves. In the prompt
    modes they extend the prompt text instead and ``BACKSPACE`` trims it;
    those edits produce no command since they never touch the document.
    """

    def __init__(
        self,
        prompt: Optional[PromptState] = None,
        *,
        keymap_registry: Optional[KeymapRegistry] = None,
    ) -> None:
        self.prompt = prompt or PromptState()
        if keymap_registry is None:
            keymap_registry = KeymapRegistry(logger_name="termedit.keymaps")
            load_default_keymaps(keymap_registry)
        self.keymap_registry = keymap_registry

    @property
    def mode(self) -> InputMode:
        return self.prompt.mode

    def handle_key(self, key: KeyInput) -> Optional[Command]:
        mode = self.prompt.mode
        binding = self.keymap_registry.lookup(mode.value, key_to_token(key))
        if binding is not None:
            return binding.command

        if mode is InputMode.EDITING:
            if key.printable:
                assert key.text is not None
                return InsertChar(key.text)
            return None

        if key.key == "BACKSPACE":
            self.prompt.erase()
        elif key.printable:
            assert key.text is not None
            self.prompt.type_text(key.text)
        return None


__all__ = ["InputHandler"]
