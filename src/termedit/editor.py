"""Editor session: applies commands and renders, in that order."""

from __future__ import annotations

import time
from pathlib import Path
from typing import Optional

from termedit.actions import command_name
from termedit.actions.dispatch import dispatch
from termedit.buffer import EditHistory, FileOperationError, open_file
from termedit.buffer.history import Clock
from termedit.config import EditorConfig
from termedit.keymaps import KeymapRegistry
from termedit.modes import InputHandler, KeyInput
from termedit.render import IncrementalRenderer, Overlay, RenderStats, Surface, ViewportModel
from termedit.runtime import telemetry
from termedit.state import CommandResult, EditorState


class CursorBlink:
    """Polled blink state; toggles once per elapsed interval."""

    def __init__(self, interval: float, *, clock: Clock = time.monotonic) -> None:
        self.interval = interval
        self._clock = clock
        self.visible = True
        self._last_toggle = clock()

    def tick(self) -> bool:
        now = self._clock()
        if now - self._last_toggle >= self.interval:
            self.visible = not self.visible
            self._last_toggle = now
        return self.visible

    def reset(self) -> None:
        """Show the cursor again, e.g. right after a key press."""

        self.visible = True
        self._last_toggle = self._clock()


class Editor:
    """Owns the editing state and runs one command or render pass at a time.

    For every command the order is fixed: the verb mutates the buffer and
    records history and dirty lines, then the viewport is reconciled; the
    next ``render`` consumes the dirty lines.
    """

    def __init__(
        self,
        surface: Surface,
        *,
        rows: int = 24,
        columns: Optional[int] = None,
        config: Optional[EditorConfig] = None,
        clock: Clock = time.monotonic,
        keymap_registry: Optional[KeymapRegistry] = None,
    ) -> None:
        self.config = config or EditorConfig()
        history = EditHistory(
            window=self.config.coalesce_window,
            clock=clock,
            max_actions=self.config.history_limit,
        )
        self.state = EditorState(
            history=history, viewport=ViewportModel.from_terminal_rows(rows)
        )
        self.input = InputHandler(self.state.prompt, keymap_registry=keymap_registry)
        self.renderer = IncrementalRenderer(
            surface,
            self.state.viewport.max_lines,
            gutter_width=self.config.gutter_width,
            banner=self.config.banner,
            columns=columns,
        )
        self.blink = CursorBlink(self.config.blink_interval, clock=clock)
        self.running = True
        self.state.dirty.mark_all()

    @property
    def text(self) -> str:
        return self.state.buffer.text

    @property
    def cursor(self) -> int:
        return self.state.cursor

    def handle_key(self, key: KeyInput) -> Optional[CommandResult]:
        """Translate one key and apply the command it produces, if any."""

        self.blink.reset()
        command = self.input.handle_key(key)
        if command is None:
            return None
        return self.apply(command)

    def apply(self, command: object) -> CommandResult:
        name = command_name(command)
        with telemetry.span(
            f"editor::{name}",
            logger_name="termedit.editor",
            component="editor",
            metadata={"command": name},
        ) as handle:
            self.state.status_message = ""
            result = dispatch(self.state, command)
            if result.status == "noop" and result.message:
                self.state.status_message = result.message
            self.reconcile()
            handle.add_metadata("status", result.status)

        if result.quit:
            self.running = False
            telemetry.record_event("quit", logger_name="termedit.editor")
        return result

    def reconcile(self) -> bool:
        viewport = self.state.viewport
        scrolled = viewport.reconcile(self.state.cursor_line)
        if scrolled:
            self.state.mark_visible()
            telemetry.record_event(
                "scroll",
                level="debug",
                data={"viewport_row": viewport.viewport_row},
                logger_name="termedit.editor",
            )
        return scrolled

    def render(self) -> RenderStats:
        state = self.state
        overlay = Overlay(
            status=state.prompt.status_text(state.status_message),
            find_term=state.prompt.confirmed_find_term,
        )
        return self.renderer.paint(
            state.dirty,
            state.viewport,
            state.buffer,
            state.cursor_position,
            overlay,
            cursor_visible=self.blink.tick(),
        )

    def open_path(self, path: str) -> bool:
        """Load ``path`` at startup; a missing file starts a new document."""

        if not Path(path).exists():
            self.state.path = path
            self.state.status_message = f"New file: {path}"
            return True
        try:
            buffer = open_file(path)
        except FileOperationError as exc:
            self.state.status_message = str(exc)
            telemetry.record_event(
                "file_error",
                level="warning",
                data={"operation": "open", "message": str(exc)},
                logger_name="termedit.editor",
            )
            return False
        self.state.replace_buffer(buffer, path=path)
        self.state.status_message = f"Opened {path} ({buffer.len_lines()} lines)"
        return True


__all__ = ["Editor", "CursorBlink"]
