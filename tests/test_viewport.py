import pytest

from termedit.render import DirtyLineSet, ViewportModel


def test_viewport_from_terminal_rows_reserves_banner_and_status() -> None:
    assert ViewportModel.from_terminal_rows(24).max_lines == 22
    assert ViewportModel.from_terminal_rows(2).max_lines == 1


def test_viewport_rejects_non_positive_height() -> None:
    with pytest.raises(ValueError):
        ViewportModel(max_lines=0)


def test_reconcile_scrolls_down_and_up() -> None:
    viewport = ViewportModel(max_lines=3)

    assert viewport.reconcile(2) is False
    assert viewport.reconcile(5) is True
    assert viewport.viewport_row == 3
    assert viewport.reconcile(1) is True
    assert viewport.viewport_row == 1


@pytest.mark.parametrize("cursor_lines", [[0, 9, 4, 12, 2, 2, 30, 0], [5, 6, 7, 8, 9, 10]])
def test_cursor_line_always_inside_viewport(cursor_lines: list[int]) -> None:
    viewport = ViewportModel(max_lines=4)

    for line in cursor_lines:
        viewport.reconcile(line)
        assert viewport.viewport_row <= line < viewport.viewport_row + viewport.max_lines
        assert viewport.contains(line)
        assert 0 <= viewport.screen_row(line) < viewport.max_lines


def test_dirty_marks_and_drain_within_viewport() -> None:
    dirty = DirtyLineSet()
    dirty.mark(1)
    dirty.mark(7)
    dirty.mark_range(3, 5)

    assert 7 in dirty
    assert dirty.drain(0, 5) == [1, 3, 4]
    assert not dirty


def test_dirty_mark_from_is_open_ended() -> None:
    dirty = DirtyLineSet([0])
    dirty.mark_from(10)
    dirty.mark_from(4)

    assert 1000 in dirty
    assert 2 not in dirty
    assert dirty.resolve(0, 7) == [0, 4, 5, 6]
