from __future__ import annotations

from typing import List

from textual import events

from termedit.adapters.textual import RowSurface, TextualEditorAdapter, TextualUIHooks
from termedit.adapters.textual.app import TermeditApp
from termedit.config import EditorConfig
from termedit.editor import Editor


def make_adapter(clock, **hooks) -> tuple[TextualEditorAdapter, RowSurface]:
    surface = RowSurface(rows=6)
    editor = Editor(surface, rows=6, config=EditorConfig(banner="hi"), clock=clock)
    hooks.setdefault("refresh", lambda: None)
    return TextualEditorAdapter(editor, TextualUIHooks(**hooks)), surface


def test_adapter_paints_on_creation(clock) -> None:
    refreshes: List[int] = []
    adapter, surface = make_adapter(clock, refresh=lambda: refreshes.append(1))

    assert refreshes == [1]
    assert surface.to_text().plain.splitlines()[0] == "hi"
    assert not adapter.editor.state.dirty


def test_adapter_applies_keys_and_reports_status(clock) -> None:
    statuses: List[str] = []
    lines: List[str] = []
    adapter, surface = make_adapter(
        clock, update_status=statuses.append, log=lines.append
    )

    adapter.handle_textual_key("h", text="h")
    adapter.handle_textual_key("i", text="i")
    adapter.handle_textual_key("f", modifiers=("CTRL",))
    adapter.handle_textual_key("i", text="i")

    assert adapter.editor.text == "hi"
    assert surface.rows[1][0].text == "   1 hi"
    assert statuses[-1] == "Find: i"
    assert any(line.startswith("key ->") for line in lines)
    assert any("status='prompt'" in line for line in lines)


def test_adapter_calls_quit_hook(clock) -> None:
    quits: List[int] = []
    adapter, _ = make_adapter(clock, quit=lambda: quits.append(1))

    result = adapter.handle_textual_key("q", modifiers=("ctrl",))

    assert result is not None and result.quit
    assert quits == [1]


def test_row_surface_overlays_cursor() -> None:
    surface = RowSurface(rows=2)
    surface.write_row(1, ())
    surface.move_cursor(1, 5)

    text = surface.row_text(1)

    assert text.plain == "      "
    assert any(span.start == 5 and span.style == "reverse" for span in text.spans)

    surface.set_cursor_visible(False)
    assert surface.row_text(1).plain == ""


def test_normalize_key_maps_textual_names() -> None:
    normalize = TermeditApp._normalize_key

    assert normalize(events.Key("ctrl+z", None)) == ("z", None, ("ctrl",))
    assert normalize(events.Key("ctrl+left", None)) == ("LEFT", None, ("ctrl",))
    assert normalize(events.Key("escape", "\x1b")) == ("ESC", None, ())
    assert normalize(events.Key("a", "a")) == ("a", "a", ())
    assert normalize(events.Key("ctrl+q", None)) is None
