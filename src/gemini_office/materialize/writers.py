"""Host writers: one host mutation per call, reported as a `WriteOutcome`.

Writers are the failure boundary between the assistant and a host document.
Every exception raised by a host is logged and converted into a failed
`WriteOutcome`; nothing escapes a writer call. The only retry owned here is
the text editor's rich-to-plain retry. Grid and slide fallbacks belong to
the pipeline.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
import logging
from typing import TypeAlias

from gemini_office.constants import DEFAULT_SLIDE_TITLE
from gemini_office.core.types import (
    ACTIVE_SELECTION,
    ChartSpec,
    DataGrid,
    HostKind,
    SlideDeck,
    TextFormat,
    WriteOutcome,
)
from gemini_office.hosts.addressing import resize_range, top_left
from gemini_office.hosts.base import PresentationHost, SpreadsheetHost, TextHost

log = logging.getLogger(__name__)


def _describe(e: Exception) -> str:
    return f"{type(e).__name__}: {e}" if str(e) else type(e).__name__


async def _attempt(operation: str, call: Callable[[], Awaitable[None]]) -> WriteOutcome:
    """Run one host call and convert any failure into a failed outcome."""
    try:
        await call()
    except Exception as e:
        log.warning("Host %s failed: %s", operation, e, exc_info=True)
        return WriteOutcome.failed(f"{operation} failed: {_describe(e)}")
    return WriteOutcome.ok()


class PlainTextWriter:
    """Writer for hosts that only support plain text insertion."""

    def __init__(self, host: TextHost) -> None:
        self.host = host

    async def write_text(
        self, content: str, fmt: TextFormat = TextFormat.PLAIN
    ) -> WriteOutcome:
        return await _attempt(
            "insert_text", lambda: self.host.insert_text(content, TextFormat.PLAIN)
        )


class TextEditorWriter(PlainTextWriter):
    """Writer for word-processor hosts.

    Rich insertion is attempted first when requested; on failure exactly one
    plain-text retry is made at the same location.
    """

    async def write_text(
        self, content: str, fmt: TextFormat = TextFormat.RICH
    ) -> WriteOutcome:
        if fmt is TextFormat.PLAIN:
            return await super().write_text(content)

        rich = await _attempt(
            "insert_text(rich)", lambda: self.host.insert_text(content, TextFormat.RICH)
        )
        if rich.succeeded:
            return rich

        log.info("Rich text insertion failed; retrying as plain text")
        plain = await super().write_text(content)
        if plain.succeeded:
            return WriteOutcome.ok(fallback_used=True)
        return WriteOutcome.failed(
            f"{rich.error_detail}; {plain.error_detail}", fallback_used=True
        )


class SpreadsheetWriter(PlainTextWriter):
    """Writer for spreadsheet hosts (formula, grid, chart, plain text)."""

    host: SpreadsheetHost

    def __init__(self, host: SpreadsheetHost) -> None:
        super().__init__(host)

    async def write_formula(self, formula: str) -> WriteOutcome:
        """Write a formula into the active cell.

        Formula errors are reported by the host later and are not awaited.
        """
        formula = formula.strip()

        async def _call() -> None:
            await self.host.insert_formula(formula, self.host.active_cell)

        return await _attempt("insert_formula", _call)

    async def write_grid(self, grid: DataGrid) -> WriteOutcome:
        """Write a grid from the selection's top-left cell, then autofit."""
        if grid.is_empty:
            return WriteOutcome.skip("empty grid")

        async def _call() -> None:
            anchor = top_left(self.host.selection)
            target = resize_range(anchor, grid.row_count, grid.column_count)
            log.debug("Writing %dx%d grid to %s", grid.row_count, grid.column_count, target)
            await self.host.insert_grid(grid, target)
            await self.host.autofit_columns(target)

        return await _attempt("insert_grid", _call)

    async def write_chart(self, spec: ChartSpec) -> WriteOutcome:
        """Create a chart over the selection; failures are terminal."""

        async def _call() -> None:
            data_range = (
                self.host.selection
                if spec.source_range == ACTIVE_SELECTION
                else spec.source_range
            )
            await self.host.insert_chart(spec.kind, data_range, spec.title)

        return await _attempt("insert_chart", _call)


class PresentationWriter(PlainTextWriter):
    """Writer for presentation hosts."""

    host: PresentationHost

    def __init__(self, host: PresentationHost) -> None:
        super().__init__(host)

    async def write_slides(self, deck: SlideDeck) -> WriteOutcome:
        """Append one slide per record, in order.

        Slides created before a mid-sequence failure are kept; the failure
        detail says how many were created.
        """
        if not deck:
            return WriteOutcome.skip("empty deck")

        total = len(deck)
        for index, record in enumerate(deck):
            title = record.title or DEFAULT_SLIDE_TITLE
            body = "\n".join(record.bullets)
            try:
                await self.host.append_slide(title, body)
            except Exception as e:
                log.warning(
                    "Slide %d of %d failed after %d created: %s",
                    index + 1,
                    total,
                    index,
                    e,
                    exc_info=True,
                )
                return WriteOutcome.failed(
                    f"slide {index + 1} of {total} failed: {_describe(e)} "
                    f"({index} created, not rolled back)"
                )
        log.debug("Appended %d slide(s)", total)
        return WriteOutcome.ok()


HostWriter: TypeAlias = TextEditorWriter | SpreadsheetWriter | PresentationWriter | PlainTextWriter

_WRITERS: dict[HostKind, type[PlainTextWriter]] = {
    HostKind.TEXT_EDITOR: TextEditorWriter,
    HostKind.SPREADSHEET: SpreadsheetWriter,
    HostKind.PRESENTATION: PresentationWriter,
    HostKind.UNKNOWN: PlainTextWriter,
}


def build_writer(kind: HostKind, host: TextHost) -> HostWriter:
    """Select the writer variant for a host kind."""
    return _WRITERS[kind](host)  # type: ignore[arg-type]
