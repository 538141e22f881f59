"""Textual app that hosts the editor."""

from __future__ import annotations

from typing import Optional, Tuple

try:  # pragma: no cover - imported only when the Textual UI is run
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.widget import Widget
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use termedit.adapters.textual.app"
    ) from exc

from termedit.config import EditorConfig
from termedit.editor import Editor

from .controller import TextualEditorAdapter, TextualUIHooks
from .surface import RowSurface

# Textual claims these itself; they are routed through priority bindings.
PRIORITY_KEYS = frozenset({"ctrl+c", "ctrl+q"})

_NAMED_KEYS = {
    "escape": "ESC",
    "enter": "ENTER",
    "backspace": "BACKSPACE",
    "tab": "TAB",
    "delete": "DELETE",
    "left": "LEFT",
    "right": "RIGHT",
    "up": "UP",
    "down": "DOWN",
    "home": "HOME",
    "end": "END",
}


class EditorView(Widget):
    """Draws the rows the renderer painted into a RowSurface."""

    DEFAULT_CSS = """
    EditorView {
        height: 1fr;
    }
    """

    def __init__(self, surface: RowSurface, **kwargs) -> None:
        super().__init__(**kwargs)
        self.surface = surface

    def render(self) -> Text:
        return self.surface.to_text()


class TermeditApp(App[None]):
    """Full-screen editor; banner, text rows and status line come from the renderer."""

    CSS = """
    Screen {
        layout: vertical;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "editor_ctrl('q')", "Quit", priority=True),
        Binding("ctrl+c", "editor_ctrl('c')", "Copy line", show=False, priority=True),
    ]

    def __init__(
        self, path: Optional[str] = None, config: Optional[EditorConfig] = None
    ) -> None:
        super().__init__()
        self.path = path
        self.config = config or EditorConfig()
        self.surface = RowSurface(rows=0)
        self.editor: Editor | None = None
        self.adapter: TextualEditorAdapter | None = None
        self._view: EditorView | None = None

    def compose(self) -> ComposeResult:
        self._view = EditorView(self.surface, id="editor-view")
        yield self._view

    async def on_mount(self) -> None:
        self.editor = Editor(
            self.surface,
            rows=max(self.size.height, 3),
            columns=self.size.width,
            config=self.config,
        )
        if self.path:
            self.editor.open_path(self.path)
        hooks = TextualUIHooks(
            refresh=self._refresh_view,
            update_status=self._update_status,
            quit=self.exit,
            log=self._log_line,
        )
        self.adapter = TextualEditorAdapter(self.editor, hooks)
        self.set_interval(self.config.blink_interval, self._blink)

    async def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        normalized = self._normalize_key(event)
        if normalized is None:
            return
        key, text, modifiers = normalized
        self.adapter.handle_textual_key(key, text=text, modifiers=modifiers)
        event.stop()

    def action_editor_ctrl(self, letter: str) -> None:
        if self.adapter:
            self.adapter.handle_textual_key(letter, modifiers=("ctrl",))

    def _blink(self) -> None:
        if self.adapter:
            self.adapter.repaint()

    def _refresh_view(self) -> None:
        if self._view:
            self._view.refresh()

    def _update_status(self, status: str) -> None:
        self.sub_title = status

    def _log_line(self, line: str) -> None:
        self.log(line)

    @staticmethod
    def _normalize_key(
        event: events.Key,
    ) -> Optional[Tuple[str, Optional[str], Tuple[str, ...]]]:
        key = event.key
        if key in PRIORITY_KEYS:
            return None
        parts = key.split("+")
        base = parts[-1]
        modifiers = tuple(part for part in parts[:-1] if part != "shift")
        if base in _NAMED_KEYS:
            return (_NAMED_KEYS[base], None, modifiers)
        if event.is_printable and event.character:
            return (event.character, event.character, modifiers)
        if len(base) == 1:
            return (base, None, modifiers)
        return None


def run_textual(path: Optional[str] = None, config: Optional[EditorConfig] = None) -> int:
    TermeditApp(path=path, config=config).run()
    return 0


__all__ = ["TermeditApp", "EditorView", "run_textual"]
