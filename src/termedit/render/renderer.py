"""Incremental painting of dirty rows against a cached virtual screen."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from termedit.buffer import Position, TextBuffer
from termedit.runtime import telemetry

from .dirty import DirtyLineSet
from .screen import RowImage, Segment, VirtualScreen, make_row
from .surface import Surface
from .viewport import ViewportModel

DEFAULT_GUTTER_WIDTH = 4
PLACEHOLDER_ROW: RowImage = (Segment(f"{'':>3}~ "),)


@dataclass(slots=True)
class Overlay:
    """Mode-dependent text the renderer shows on top of the document."""

    status: str = ""
    find_term: Optional[str] = None


@dataclass(slots=True)
class RenderStats:
    rows_written: int = 0
    rows_skipped: int = 0


def highlight(text: str, term: Optional[str]) -> List[Segment]:
    """Split ``text`` so each occurrence of ``term`` is a reverse-video run."""

    if not term:
        return [Segment(text)]
    segments: List[Segment] = []
    start = 0
    while True:
        found = text.find(term, start)
        if found < 0:
            break
        segments.append(Segment(text[start:found]))
        segments.append(Segment(term, reverse=True))
        start = found + len(term)
    segments.append(Segment(text[start:]))
    return segments


def compose_row(
    line: int,
    content: str,
    *,
    find_term: Optional[str] = None,
    gutter_width: int = DEFAULT_GUTTER_WIDTH,
) -> RowImage:
    # A carriage return would send the terminal cursor back over the gutter.
    content = content.removesuffix("\r")
    gutter = Segment(f"{line + 1:>{gutter_width}} ")
    return make_row([gutter, *highlight(content, find_term)])


def clip_row(image: RowImage, columns: Optional[int]) -> RowImage:
    if columns is None:
        return image
    clipped: List[Segment] = []
    remaining = columns
    for segment in image:
        if remaining <= 0:
            break
        clipped.append(Segment(segment.text[:remaining], segment.reverse))
        remaining -= len(segment.text)
    return make_row(clipped)


class IncrementalRenderer:
    """Paints only the rows whose intended content differs from the cache.

    Screen row 0 is the banner, rows ``1..max_lines`` show the viewport and
    row ``max_lines + 1`` is the status/prompt line. The status line is
    repainted on every pass; text rows only when they changed.
    """

    def __init__(
        self,
        surface: Surface,
        max_lines: int,
        *,
        gutter_width: int = DEFAULT_GUTTER_WIDTH,
        banner: str = "",
        columns: Optional[int] = None,
    ) -> None:
        self.surface = surface
        self.gutter_width = gutter_width
        self.banner = banner
        self.columns = columns
        self.screen = VirtualScreen(max_lines)
        self._banner_painted = False
        self.logger = telemetry.get_logger("termedit.render")

    @property
    def max_lines(self) -> int:
        return len(self.screen)

    @property
    def status_row(self) -> int:
        return self.max_lines + 1

    def invalidate(self) -> None:
        """Forget the cache so the next pass repaints every row it is given."""

        self.screen.invalidate()
        self._banner_painted = False

    def compose(
        self, line: int, buffer: TextBuffer, find_term: Optional[str] = None
    ) -> RowImage:
        if line >= buffer.len_lines():
            return clip_row(PLACEHOLDER_ROW, self.columns)
        image = compose_row(
            line,
            buffer.line_content(line),
            find_term=find_term,
            gutter_width=self.gutter_width,
        )
        return clip_row(image, self.columns)

    def paint(
        self,
        dirty: DirtyLineSet,
        viewport: ViewportModel,
        buffer: TextBuffer,
        cursor: Position,
        overlay: Overlay,
        *,
        cursor_visible: bool = True,
    ) -> RenderStats:
        if viewport.max_lines != self.max_lines:
            self.logger.debug(f"resize screen {self.max_lines} -> {viewport.max_lines} rows")
            self.screen.resize(viewport.max_lines)

        stats = RenderStats()
        first = viewport.viewport_row
        with telemetry.span(
            "render::paint",
            logger_name="termedit.render",
            component="render",
            metadata={"viewport_row": first},
        ) as handle:
            self.surface.set_cursor_visible(False)
            if not self._banner_painted:
                self.surface.write_row(0, make_row([Segment(self.banner)]))
                self._banner_painted = True
            self.surface.write_row(
                self.status_row, clip_row(make_row([Segment(overlay.status)]), self.columns)
            )

            for line in dirty.drain(first, first + viewport.max_lines):
                row = line - first
                image = self.compose(line, buffer, overlay.find_term)
                if self.screen.matches(row, image):
                    stats.rows_skipped += 1
                    continue
                self.surface.write_row(row + 1, image)
                self.screen.update(row, image)
                stats.rows_written += 1

            cursor_line, cursor_column = cursor
            self.surface.move_cursor(
                cursor_line - first + 1, cursor_column + self.gutter_width + 1
            )
            self.surface.set_cursor_visible(cursor_visible)
            self.surface.flush()
            handle.add_metadata("rows_written", stats.rows_written)
            handle.add_metadata("rows_skipped", stats.rows_skipped)
        return stats


__all__ = [
    "IncrementalRenderer",
    "Overlay",
    "RenderStats",
    "PLACEHOLDER_ROW",
    "DEFAULT_GUTTER_WIDTH",
    "compose_row",
    "clip_row",
    "highlight",
]
