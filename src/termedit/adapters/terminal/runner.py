"""Main loop for the plain ANSI terminal front end."""

from __future__ import annotations

from typing import Optional

from termedit.config import EditorConfig
from termedit.editor import Editor
from termedit.runtime import telemetry

from .session import InputReader, TerminalSession
from .surface import AnsiSurface


def run_terminal(
    path: Optional[str] = None,
    config: Optional[EditorConfig] = None,
    *,
    session: Optional[TerminalSession] = None,
) -> int:
    """Edit ``path`` until the quit command; returns the process exit code."""

    config = config or EditorConfig()
    session = session or TerminalSession()
    size = session.size()
    editor = Editor(
        AnsiSurface(session.stdout), rows=size.rows, columns=size.cols, config=config
    )
    if path:
        editor.open_path(path)
    reader = InputReader(session.stdin.fileno())

    telemetry.record_event(
        "session_start",
        data={"rows": size.rows, "cols": size.cols, "path": path or ""},
        logger_name="termedit.terminal",
    )
    with session.managed_mode():
        while editor.running:
            editor.render()
            for key in reader.read(config.blink_interval):
                editor.handle_key(key)
                if not editor.running:
                    break
    telemetry.record_event("session_end", logger_name="termedit.terminal")
    return 0


__all__ = ["run_terminal"]
