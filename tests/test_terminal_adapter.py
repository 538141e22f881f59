from __future__ import annotations

import io
import os

from termedit.adapters.terminal import AnsiSurface, InputReader, KeyDecoder
from termedit.modes import KeyInput
from termedit.render import Segment


def make_decoder() -> KeyDecoder:
    return KeyDecoder()


def test_decoder_maps_control_and_simple_keys() -> None:
    decoder = make_decoder()

    keys = decoder.feed("a\x11\r\x7f\t")

    assert keys == [
        KeyInput("a", text="a"),
        KeyInput("q", ("ctrl",)),
        KeyInput("ENTER"),
        KeyInput("BACKSPACE"),
        KeyInput("TAB"),
    ]


def test_decoder_parses_arrow_sequences() -> None:
    decoder = make_decoder()

    keys = decoder.feed("\x1b[A\x1bOD\x1b[1;5C")

    assert keys == [
        KeyInput("UP"),
        KeyInput("LEFT"),
        KeyInput("RIGHT", ("ctrl",)),
    ]


def test_decoder_waits_for_split_sequence() -> None:
    decoder = make_decoder()

    assert decoder.feed("\x1b[") == []
    assert decoder.pending
    assert decoder.feed("B") == [KeyInput("DOWN")]
    assert not decoder.pending


def test_lone_escape_resolves_on_flush() -> None:
    decoder = make_decoder()

    assert decoder.feed("\x1b") == []
    assert decoder.flush() == [KeyInput("ESC")]
    assert decoder.flush() == []


def test_double_escape_yields_escape_key() -> None:
    decoder = make_decoder()

    assert decoder.feed("\x1b\x1b[D") == [KeyInput("ESC"), KeyInput("LEFT")]


def test_unknown_sequence_is_dropped() -> None:
    decoder = make_decoder()

    assert decoder.feed("\x1b[99Zx") == [KeyInput("x", text="x")]


def test_ansi_surface_buffers_until_flush() -> None:
    stream = io.StringIO()
    surface = AnsiSurface(stream)

    surface.write_row(2, [Segment("   1 "), Segment("foo", reverse=True)])
    surface.move_cursor(2, 5)
    assert stream.getvalue() == ""

    surface.flush()

    assert stream.getvalue() == "\x1b[3;1H\x1b[2K   1 \x1b[7mfoo\x1b[0m\x1b[3;6H"


def test_ansi_surface_only_emits_visibility_changes() -> None:
    stream = io.StringIO()
    surface = AnsiSurface(stream)

    surface.set_cursor_visible(False)
    surface.set_cursor_visible(False)
    surface.set_cursor_visible(True)
    surface.flush()

    assert stream.getvalue() == "\x1b[?25l\x1b[?25h"


def test_input_reader_joins_character_split_across_reads() -> None:
    read_fd, write_fd = os.pipe()
    try:
        os.write(write_fd, ("a" * 1023 + "é").encode("utf-8"))
        reader = InputReader(read_fd)

        first = reader.read(0.1)
        second = reader.read(0.1)
    finally:
        os.close(read_fd)
        os.close(write_fd)

    assert len(first) == 1023
    assert second == [KeyInput("é", text="é")]
