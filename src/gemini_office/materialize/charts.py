"""Chart intent detection from keyword cues in a response."""

from collections.abc import Iterable
import dataclasses
import logging

from gemini_office.constants import (
    DEFAULT_BAR_KEYWORDS,
    DEFAULT_CHART_TITLE,
    DEFAULT_LINE_KEYWORDS,
)
from gemini_office.core.types import ACTIVE_SELECTION, ChartKind, ChartSpec

log = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class ChartKeywordRule:
    """Maps any of `keywords` (case-insensitive substrings) to a chart kind."""

    keywords: tuple[str, ...]
    kind: ChartKind

    def matches(self, lowered_text: str) -> bool:
        return any(k in lowered_text for k in self.keywords)


def default_chart_rules(
    line_keywords: Iterable[str] = DEFAULT_LINE_KEYWORDS,
    bar_keywords: Iterable[str] = DEFAULT_BAR_KEYWORDS,
) -> tuple[ChartKeywordRule, ...]:
    """Priority order: pie, then line, then bar."""

    def _normalize(words: Iterable[str]) -> tuple[str, ...]:
        return tuple(w.lower() for w in words if w)

    return (
        ChartKeywordRule(("pie",), ChartKind.PIE),
        ChartKeywordRule(_normalize(line_keywords), ChartKind.LINE),
        ChartKeywordRule(_normalize(bar_keywords), ChartKind.BAR),
    )


class ChartIntentDetector:
    """Select a chart kind for a spreadsheet chart request.

    The data source is always the host's active selection; this class never
    inspects or validates it.
    """

    def __init__(
        self,
        rules: tuple[ChartKeywordRule, ...] | None = None,
        *,
        default_kind: ChartKind = ChartKind.COLUMN,
        title: str = DEFAULT_CHART_TITLE,
    ) -> None:
        self.rules = rules if rules is not None else default_chart_rules()
        self.default_kind = default_kind
        self.title = title

    def detect(self, text: str) -> ChartKind:
        lowered = text.lower()
        for rule in self.rules:
            if rule.matches(lowered):
                return rule.kind
        return self.default_kind

    def build_spec(self, text: str, title: str | None = None) -> ChartSpec:
        """Return a `ChartSpec` anchored to the active selection."""
        kind = self.detect(text)
        log.debug("Detected chart kind %s", kind)
        return ChartSpec(
            kind=kind,
            title=title or self.title,
            source_range=ACTIVE_SELECTION,
        )
