"""Content classification for model responses.

The classifier decides which shape of content a response represents for the
active host. Policy lives in an ordered table of `ClassificationRule`s; the
first rule whose predicate matches wins. Rules are partitioned by host, so
ties cannot occur, and the final catch-all makes classification total.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
import dataclasses
import logging

from gemini_office.constants import DEFAULT_CHART_KEYWORDS
from gemini_office.core.types import ContentKind, HostKind

log = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class ClassificationRule:
    """One entry of the classification policy.

    Attributes:
        name: Stable identifier used in logs and diagnostics.
        predicate: Pure function of (text, host) deciding whether the rule applies.
        kind: The classification produced when the predicate matches.
    """

    name: str
    predicate: Callable[[str, HostKind], bool]
    kind: ContentKind


def default_rules(
    chart_keywords: Iterable[str] = DEFAULT_CHART_KEYWORDS,
) -> tuple[ClassificationRule, ...]:
    """Build the default rule table, in evaluation order."""
    keywords = tuple(k.lower() for k in chart_keywords if k)

    def _is_formula(text: str, host: HostKind) -> bool:
        return host is HostKind.SPREADSHEET and text.strip().startswith("=")

    def _mentions_chart(text: str, host: HostKind) -> bool:
        lowered = text.lower()
        return host is HostKind.SPREADSHEET and any(k in lowered for k in keywords)

    return (
        ClassificationRule("spreadsheet_formula", _is_formula, ContentKind.FORMULA),
        ClassificationRule("spreadsheet_chart", _mentions_chart, ContentKind.CHART_REQUEST),
        ClassificationRule(
            "spreadsheet_data",
            lambda _text, host: host is HostKind.SPREADSHEET,
            ContentKind.TABULAR_DATA,
        ),
        ClassificationRule(
            "presentation_slides",
            lambda _text, host: host is HostKind.PRESENTATION,
            ContentKind.SLIDE_DECK,
        ),
        ClassificationRule("plain_text", lambda _text, _host: True, ContentKind.PLAIN_TEXT),
    )


class ContentClassifier:
    """Classify a response string for a given host.

    Example:
        classifier = ContentClassifier()
        classifier.classify("=SUM(A1:A3)", HostKind.SPREADSHEET)  # FORMULA
    """

    def __init__(self, rules: tuple[ClassificationRule, ...] | None = None) -> None:
        self.rules = rules if rules is not None else default_rules()

    def classify(self, text: str, host: HostKind) -> ContentKind:
        for rule in self.rules:
            if rule.predicate(text, host):
                log.debug("Classified response via rule %r as %s", rule.name, rule.kind)
                return rule.kind
        # Custom tables without a catch-all still classify totally.
        return ContentKind.PLAIN_TEXT
