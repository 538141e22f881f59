import pytest

from termedit.buffer import BufferRangeError, TextBuffer


def make_buffer(text: str = "") -> TextBuffer:
    return TextBuffer.from_text(text)


def test_empty_buffer_has_one_line() -> None:
    buffer = TextBuffer()

    assert buffer.len_chars() == 0
    assert buffer.len_lines() == 1
    assert buffer.line_content(0) == ""
    assert buffer.char_to_line(0) == 0


def test_insert_tracks_lines_and_length() -> None:
    buffer = make_buffer()

    buffer.insert(0, "hello\nworld")

    assert buffer.text == "hello\nworld"
    assert buffer.len_chars() == 11
    assert buffer.len_lines() == 2
    assert buffer.line(0) == "hello\n"
    assert buffer.line_content(1) == "world"
    assert buffer.position(11) == (1, 5)


def test_insert_in_middle_of_line() -> None:
    buffer = make_buffer("held")

    buffer.insert(3, "lo worl")

    assert buffer.text == "hello world"
    assert buffer.len_lines() == 1


def test_trailing_newline_opens_empty_last_line() -> None:
    buffer = make_buffer("abc\n")

    assert buffer.len_lines() == 2
    assert buffer.line_content(1) == ""
    assert buffer.char_to_line(4) == 1
    assert buffer.line_to_char(1) == 4


def test_insert_out_of_range_raises() -> None:
    buffer = make_buffer("abc")

    with pytest.raises(BufferRangeError) as excinfo:
        buffer.insert(4, "x")

    assert excinfo.value.offset == 4
    assert buffer.text == "abc"


def test_delete_returns_removed_text_and_joins_lines() -> None:
    buffer = make_buffer("one\ntwo\nthree")

    removed = buffer.delete(2, 4)

    assert removed == "e\ntw"
    assert buffer.text == "ono\nthree"
    assert buffer.len_lines() == 2
    assert buffer.line_to_char(1) == 4


def test_delete_is_clamped_to_buffer_end() -> None:
    buffer = make_buffer("abc")

    assert buffer.delete(1, 10) == "bc"
    assert buffer.text == "a"


@pytest.mark.parametrize("offset,length", [(0, 0), (3, 1), (-1, 2), (1, -4)])
def test_delete_outside_buffer_is_a_noop(offset: int, length: int) -> None:
    buffer = make_buffer("abc")

    assert buffer.delete(offset, length) == ""
    assert buffer.text == "abc"


def test_char_to_line_at_line_boundaries() -> None:
    buffer = make_buffer("ab\ncd\n\nef")

    assert [buffer.char_to_line(offset) for offset in range(len(buffer) + 1)] == [
        0, 0, 0, 1, 1, 1, 2, 3, 3, 3,
    ]
    with pytest.raises(BufferRangeError):
        buffer.char_to_line(len(buffer) + 1)


def test_line_to_char_accepts_line_count() -> None:
    buffer = make_buffer("ab\ncd")

    assert buffer.line_to_char(0) == 0
    assert buffer.line_to_char(1) == 3
    assert buffer.line_to_char(2) == 5
    with pytest.raises(BufferRangeError):
        buffer.line_to_char(3)


def test_offset_for_clamps_column_to_line_content() -> None:
    buffer = make_buffer("long line\nab\n")

    assert buffer.offset_for(1, 7) == 12
    assert buffer.offset_for(0, 4) == 4
    assert buffer.offset_for(2, 3) == 13


def test_slice_spans_lines() -> None:
    buffer = make_buffer("one\ntwo\nthree")

    assert buffer.slice(2, 9) == "e\ntwo\nt"
    assert buffer.slice(4) == "two\nthree"
    assert buffer.slice(3, 3) == ""
    with pytest.raises(BufferRangeError):
        buffer.slice(5, 2)


def test_mixed_edits_keep_line_index_consistent() -> None:
    buffer = make_buffer("alpha\nbeta\ngamma")

    buffer.insert(6, "\n")
    buffer.delete(0, 6)
    buffer.insert(buffer.len_chars(), "\ndelta")

    assert buffer.text == "\nbeta\ngamma\ndelta"
    assert [buffer.line_to_char(line) for line in range(buffer.len_lines())] == [
        0, 1, 6, 12,
    ]
    assert list(buffer) == ["\n", "beta\n", "gamma\n", "delta"]
