"""Viewport tracking and incremental rendering."""

from .dirty import DirtyLineSet
from .renderer import (
    IncrementalRenderer,
    Overlay,
    PLACEHOLDER_ROW,
    RenderStats,
    compose_row,
    highlight,
)
from .screen import RowImage, Segment, VirtualScreen, make_row, row_text
from .surface import Surface
from .viewport import RESERVED_ROWS, ViewportModel

__all__ = [
    "DirtyLineSet",
    "ViewportModel",
    "RESERVED_ROWS",
    "Segment",
    "RowImage",
    "VirtualScreen",
    "make_row",
    "row_text",
    "Surface",
    "IncrementalRenderer",
    "Overlay",
    "RenderStats",
    "PLACEHOLDER_ROW",
    "compose_row",
    "highlight",
]
