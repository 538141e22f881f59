"""Boundary between the renderer and whatever displays its rows."""

from __future__ import annotations

from typing import Protocol, Sequence

from .screen import Segment


class Surface(Protocol):
    """Paint target for the renderer (a terminal, a widget, a test double).

    Rows and columns are 0-based screen coordinates. ``write_row`` replaces
    the whole row: the implementation clears it before drawing ``segments``.
    """

    def write_row(self, row: int, segments: Sequence[Segment]) -> None:
        """Replace screen row ``row`` with ``segments``."""
        ...

    def move_cursor(self, row: int, column: int) -> None:
        """Place the hardware cursor."""
        ...

    def set_cursor_visible(self, visible: bool) -> None:
        """Show or hide the hardware cursor."""
        ...

    def flush(self) -> None:
        """Push buffered output to the display."""
        ...


__all__ = ["Surface"]
