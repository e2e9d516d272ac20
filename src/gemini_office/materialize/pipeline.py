"""Response-to-document materialization.

`MaterializationPipeline.materialize` classifies a response for the active
host, parses it into the matching payload, and hands it to the host writer.
When a write fails on a path with a defined fallback, the original response
is inserted once as plain text; fallbacks never cascade.

Example:
    pipeline = MaterializationPipeline()
    outcome = await pipeline.materialize(reply.text, HostKind.SPREADSHEET, host)
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
import logging
from typing import TypeAlias

from gemini_office.config.types import FrozenConfig
from gemini_office.core.types import ContentKind, HostKind, TextFormat, WriteOutcome
from gemini_office.hosts.base import TextHost
from gemini_office.telemetry import TelemetryContext, TelemetryContextProtocol

from .charts import ChartIntentDetector, default_chart_rules
from .classifier import ContentClassifier, default_rules
from .slides import SlideDeckParser
from .tabular import TabularParser
from .text import is_error_response
from .writers import HostWriter, PresentationWriter, SpreadsheetWriter, build_writer

log = logging.getLogger(__name__)

# Content kinds whose failed write is retried once as plain text.
DEFAULT_FALLBACK_KINDS = frozenset({ContentKind.TABULAR_DATA, ContentKind.SLIDE_DECK})

_Handler: TypeAlias = Callable[[str, HostWriter], Awaitable[WriteOutcome]]


class MaterializationPipeline:
    """Classify, parse and write a response into a host document.

    Attributes:
        config: Frozen configuration supplying keyword tables and the error prefix.
        classifier: Decides the `ContentKind` of a response.
        tabular_parser: Parses spreadsheet data.
        slide_parser: Parses presentation slides.
        chart_detector: Picks a chart kind for chart requests.
        fallback_kinds: Content kinds that get the one-shot plain-text fallback.
    """

    def __init__(
        self,
        config: FrozenConfig | None = None,
        *,
        classifier: ContentClassifier | None = None,
        tabular_parser: TabularParser | None = None,
        slide_parser: SlideDeckParser | None = None,
        chart_detector: ChartIntentDetector | None = None,
        fallback_kinds: frozenset[ContentKind] = DEFAULT_FALLBACK_KINDS,
        telemetry: TelemetryContextProtocol | None = None,
    ) -> None:
        self.config = config or FrozenConfig()
        cfg = self.config
        self.classifier = classifier or ContentClassifier(default_rules(cfg.chart_keywords))
        self.tabular_parser = tabular_parser or TabularParser(cfg.preamble_tokens)
        self.slide_parser = slide_parser or SlideDeckParser(cfg.preamble_tokens)
        self.chart_detector = chart_detector or ChartIntentDetector(
            default_chart_rules(cfg.line_keywords, cfg.bar_keywords),
            title=cfg.chart_title,
        )
        self.fallback_kinds = fallback_kinds
        self._telemetry = telemetry or TelemetryContext()
        self._handlers: dict[ContentKind, _Handler] = {
            ContentKind.FORMULA: self._write_formula,
            ContentKind.TABULAR_DATA: self._write_grid,
            ContentKind.CHART_REQUEST: self._write_chart,
            ContentKind.SLIDE_DECK: self._write_slides,
            ContentKind.PLAIN_TEXT: self._write_text,
        }

    async def materialize(
        self, text: str, host_kind: HostKind, host: TextHost
    ) -> WriteOutcome:
        """Write a response into the host in the shape it represents.

        Args:
            text: The raw model response.
            host_kind: Which kind of host `host` is.
            host: The host adapter receiving the write.

        Returns:
            The final `WriteOutcome`. Empty input, rendered error replies and
            empty parse results are skipped without touching the host.
        """
        with self._telemetry("materialize", host=host_kind.value):
            if not text or not text.strip():
                return self._skipped("empty response")
            if is_error_response(text, self.config.error_prefix):
                return self._skipped("error reply")

            kind = self.classifier.classify(text, host_kind)
            log.debug("Materializing %s response for %s host", kind.value, host_kind.value)
            writer = build_writer(host_kind, host)
            outcome = await self._handlers[kind](text, writer)

            if outcome.skipped:
                log.info("Nothing to write for %s: %s", kind.value, outcome.error_detail)
                return self._skipped(outcome.error_detail or kind.value)
            retry = not outcome.fallback_used and kind in self.fallback_kinds
            if not outcome.succeeded and retry:
                outcome = await self._fallback(text, writer, outcome)
            if not outcome.succeeded:
                self._telemetry.count("failed")
                log.warning("Materialization failed: %s", outcome.error_detail)
            return outcome

    async def _fallback(
        self, text: str, writer: HostWriter, primary: WriteOutcome
    ) -> WriteOutcome:
        log.info("Falling back to plain text after: %s", primary.error_detail)
        self._telemetry.count("fallback")
        outcome = await writer.write_text(text, TextFormat.PLAIN)
        if outcome.succeeded:
            return WriteOutcome.ok(fallback_used=True)
        return WriteOutcome.failed(
            f"{primary.error_detail}; fallback {outcome.error_detail}",
            fallback_used=True,
        )

    def _skipped(self, reason: str) -> WriteOutcome:
        log.debug("Skipping materialization: %s", reason)
        self._telemetry.count("skipped")
        return WriteOutcome.skip(reason)

    # --- Per-kind handlers ---

    async def _write_formula(self, text: str, writer: HostWriter) -> WriteOutcome:
        if not isinstance(writer, SpreadsheetWriter):
            return await self._write_unsupported(ContentKind.FORMULA, text, writer)
        return await writer.write_formula(text)

    async def _write_grid(self, text: str, writer: HostWriter) -> WriteOutcome:
        if not isinstance(writer, SpreadsheetWriter):
            return await self._write_unsupported(ContentKind.TABULAR_DATA, text, writer)
        grid = self.tabular_parser.parse(text)
        if grid.is_empty:
            return WriteOutcome.skip("no rows parsed")
        return await writer.write_grid(grid)

    async def _write_chart(self, text: str, writer: HostWriter) -> WriteOutcome:
        if not isinstance(writer, SpreadsheetWriter):
            return await self._write_unsupported(ContentKind.CHART_REQUEST, text, writer)
        return await writer.write_chart(self.chart_detector.build_spec(text))

    async def _write_slides(self, text: str, writer: HostWriter) -> WriteOutcome:
        if not isinstance(writer, PresentationWriter):
            return await self._write_unsupported(ContentKind.SLIDE_DECK, text, writer)
        deck = self.slide_parser.parse(text)
        if not deck:
            return WriteOutcome.skip("no slides parsed")
        return await writer.write_slides(deck)

    async def _write_text(self, text: str, writer: HostWriter) -> WriteOutcome:
        return await writer.write_text(text)

    async def _write_unsupported(
        self, kind: ContentKind, text: str, writer: HostWriter
    ) -> WriteOutcome:
        # A custom classifier can name a kind the host has no operation for.
        log.warning(
            "%s cannot write %s content; inserting as text",
            type(writer).__name__,
            kind.value,
        )
        outcome = await self._write_text(text, writer)
        if outcome.succeeded:
            return WriteOutcome.ok(fallback_used=True)
        return WriteOutcome.failed(outcome.error_detail or kind.value, fallback_used=True)
