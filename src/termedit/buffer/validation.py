"""Clamping helpers used where commands address the buffer."""

from __future__ import annotations

from .text import TextBuffer


def clamp_offset(buffer: TextBuffer, offset: int) -> int:
    return max(0, min(offset, buffer.len_chars()))


__all__ = ["clamp_offset"]
