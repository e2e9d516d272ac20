"""Slide deck parsing for presentation hosts.

Two strategies are tried in order, first successful one wins:

1. Structured: a JSON array of ``{"title": ..., "points": [...]}`` objects
   (``bullets`` is accepted as an alias) found anywhere in the response.
2. Single slide: the first meaningful line is the title, every following
   line is a bullet.

Malformed or pathologically nested JSON never raises; it simply falls
through to the next candidate array, then to the next strategy.
"""

from collections.abc import Iterable
import json
import logging
import re
from typing import Any

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
)

from gemini_office.constants import DEFAULT_PREAMBLE_TOKENS
from gemini_office.core.types import SlideDeck, SlideRecord

from .text import drop_code_fences, drop_preamble, non_blank_lines

log = logging.getLogger(__name__)

# Where a JSON array of objects may begin.
_ARRAY_START_RE = re.compile(r"\[\s*\{")
_DECODER = json.JSONDecoder()
_TITLE_MARKUP_RE = re.compile(r"^[\s#>*_•]+")
_TITLE_LABEL_RE = re.compile(r"^title\s*:\s*", re.IGNORECASE)
_BULLET_MARKER_RE = re.compile(r"^\s*(?:[-•]|\*(?!\*))\s*")


class SlidePayload(BaseModel):
    """Wire shape of one slide in the structured response convention."""

    model_config = ConfigDict(extra="ignore")

    title: str = ""
    bullets: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("points", "bullets"),
    )

    @field_validator("title", mode="before")
    @classmethod
    def _coerce_title(cls, v: Any) -> Any:
        if v is None:
            return ""
        return v if isinstance(v, str) else str(v)

    @field_validator("bullets", mode="before")
    @classmethod
    def _coerce_bullets(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        if isinstance(v, list):
            return [item if isinstance(item, str) else str(item) for item in v]
        return v

    def is_meaningful(self) -> bool:
        return bool(self.title.strip()) or bool(self.bullets)

    def to_record(self) -> SlideRecord:
        return SlideRecord(
            title=self.title.strip(),
            bullets=tuple(b.strip() for b in self.bullets),
        )


_PAYLOAD_LIST = TypeAdapter(list[SlidePayload])


def clean_title(line: str) -> str:
    """Strip heading markup and a leading ``TITLE:`` label from a line."""
    title = _TITLE_MARKUP_RE.sub("", line)
    title = _TITLE_LABEL_RE.sub("", title)
    return title.strip().strip("*_").strip()


def clean_bullet(line: str) -> str:
    """Strip one leading bullet marker and surrounding whitespace."""
    return _BULLET_MARKER_RE.sub("", line, count=1).strip()


class SlideDeckParser:
    """Turn a response into an ordered sequence of slide records."""

    def __init__(self, preamble_tokens: Iterable[str] = DEFAULT_PREAMBLE_TOKENS) -> None:
        self.preamble_tokens = tuple(preamble_tokens)

    def parse(self, text: str) -> SlideDeck:
        """Parse text into a `SlideDeck`; an empty deck means nothing to write."""
        deck = self._parse_structured(text)
        if deck:
            log.debug("Parsed %d slide(s) from structured JSON", len(deck))
            return deck
        return self._parse_single_slide(text)

    def _parse_structured(self, text: str) -> SlideDeck:
        for match in _ARRAY_START_RE.finditer(text):
            try:
                data, _ = _DECODER.raw_decode(text, match.start())
                payloads = _PAYLOAD_LIST.validate_python(data)
            except (json.JSONDecodeError, ValidationError, RecursionError) as e:
                log.debug("Structured slide candidate rejected: %s", e)
                continue
            deck = tuple(p.to_record() for p in payloads if p.is_meaningful())
            if deck:
                return deck
        return ()

    def _parse_single_slide(self, text: str) -> SlideDeck:
        lines = drop_code_fences(
            drop_preamble(non_blank_lines(text), self.preamble_tokens)
        )
        if not lines:
            return ()
        bullets = tuple(b for b in (clean_bullet(line) for line in lines[1:]) if b)
        return (SlideRecord(title=clean_title(lines[0]), bullets=bullets),)
