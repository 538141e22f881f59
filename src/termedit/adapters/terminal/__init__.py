"""Plain ANSI terminal front end."""

from .keys import KeyDecoder
from .runner import run_terminal
from .session import InputReader, TerminalSession, TerminalSize
from .surface import AnsiSurface

__all__ = [
    "AnsiSurface",
    "KeyDecoder",
    "InputReader",
    "TerminalSession",
    "TerminalSize",
    "run_terminal",
]
