"""Bridges the Editor to Textual widgets through a set of UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from termedit.editor import Editor
from termedit.modes import KeyInput
from termedit.render import RenderStats
from termedit.state import CommandResult


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    refresh: Callable[[], None]
    update_status: Callable[[str], None] = _noop
    quit: Callable[[], None] = _noop
    # Optional realtime log callback a host may use to surface debug lines
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Feeds Textual key events to the Editor and repaints after each one."""

    def __init__(self, editor: Editor, hooks: TextualUIHooks) -> None:
        self.editor = editor
        self.hooks = hooks
        self.repaint()

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> Optional[CommandResult]:
        """Translate a Textual key event into a KeyInput and apply it."""

        normalized_modifiers = tuple(str(mod).lower() for mod in modifiers)
        self._log_state("key ->", key=key, text=text, mods=normalized_modifiers)
        result = self.editor.handle_key(
            KeyInput(key=key, text=text, modifiers=normalized_modifiers)
        )
        if result is not None:
            self._log_state(
                "result <-",
                consumed=result.consumed,
                status=result.status,
                message=result.message,
            )
            if result.quit:
                self.hooks.quit()
                return result
        self.repaint()
        return result

    def repaint(self) -> RenderStats:
        """Run one render pass; also driven by the blink timer."""

        stats = self.editor.render()
        state = self.editor.state
        self.hooks.update_status(state.prompt.status_text(state.status_message))
        self.hooks.refresh()
        return stats

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        state = self.editor.state
        return {
            "mode": state.prompt.mode.value,
            "cursor": state.cursor,
            "viewport_row": state.viewport.viewport_row,
            "undo_depth": state.history.undo_depth,
            "path": state.path,
        }


__all__ = ["TextualEditorAdapter", "TextualUIHooks"]
