"""Terminal ownership: raw mode, alternate screen and input reads."""

from __future__ import annotations

import codecs
import os
import select
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, List, Optional, TextIO

from termedit.modes import KeyInput

from .keys import KeyDecoder
from .surface import HIDE_CURSOR, RESET, SHOW_CURSOR

ALT_SCREEN_ON = "\x1b[?1049h"
ALT_SCREEN_OFF = "\x1b[?1049l"
CLEAR_SCREEN = "\x1b[2J\x1b[H"

# How long a lone ESC waits for the rest of a sequence.
ESCAPE_TIMEOUT = 0.05


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""

    rows: int
    cols: int


class TerminalSession:
    """Puts the terminal into full-screen raw mode for the editor's lifetime."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def size(self) -> TerminalSize:
        try:
            size = os.get_terminal_size(self.stdout.fileno())
            return TerminalSize(size.lines, size.columns)
        except OSError:
            return TerminalSize(24, 80)

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    @contextmanager
    def raw_mode(self) -> Iterator[None]:
        """Raw input on Unix terminals; a no-op where termios is unavailable."""

        try:
            import termios
            import tty
        except ImportError:
            yield
            return
        fd = self.stdin.fileno()
        old_settings = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            yield
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)

    @contextmanager
    def alternate_screen(self) -> Iterator[None]:
        self.write(ALT_SCREEN_ON + CLEAR_SCREEN)
        try:
            yield
        finally:
            self.write(ALT_SCREEN_OFF)

    @contextmanager
    def managed_mode(self) -> Iterator[None]:
        """Alternate screen, hidden cursor and raw input; restored on exit."""

        with self.alternate_screen():
            self.write(HIDE_CURSOR)
            try:
                with self.raw_mode():
                    yield
            finally:
                self.write(SHOW_CURSOR + RESET)


class InputReader:
    """Reads whatever input is available and decodes it into keys.

    Uses ``os.read`` on the descriptor so escape sequences are not held back
    by Python's own buffering.
    """

    def __init__(self, fd: int, decoder: Optional[KeyDecoder] = None) -> None:
        self._fd = fd
        self.decoder = decoder or KeyDecoder()
        # Multi-byte characters may straddle two reads.
        self._utf8 = codecs.getincrementaldecoder("utf-8")(errors="replace")

    def read(self, timeout: float) -> List[KeyInput]:
        """Keys that arrived within ``timeout`` seconds; empty on timeout."""

        if self.decoder.pending:
            timeout = min(timeout, ESCAPE_TIMEOUT)
        if not self._has_input(timeout):
            return self.decoder.flush()
        data = os.read(self._fd, 1024)
        return self.decoder.feed(self._utf8.decode(data))

    def _has_input(self, timeout: float) -> bool:
        ready, _, _ = select.select([self._fd], [], [], timeout)
        return bool(ready)


__all__ = ["TerminalSession", "TerminalSize", "InputReader", "ESCAPE_TIMEOUT"]
