"""Core data types that flow through the materialization pipeline.

This module defines the small, immutable value objects exchanged between the
classifier, the parsers, the host writers and the chat session. None of them
outlive a single request; each stage derives a new value instead of mutating
the previous one.
"""

from __future__ import annotations

import dataclasses
import enum
import typing

# --- Minimal guard helpers (clarity > boilerplate) ---


def _is_tuple_of(value: object, typ: type | tuple[type, ...]) -> bool:
    return isinstance(value, tuple) and all(isinstance(v, typ) for v in value)


def _require(
    *,
    condition: bool,
    message: str,
    exc: type[Exception] = ValueError,
    field_name: str | None = None,
) -> None:
    """Centralized validation with optional field context for clearer errors."""
    if not condition:
        if field_name:
            raise exc(f"{field_name}: {message}")
        raise exc(message)


# --- Result Monad for Robust Error Handling ---
# Failures of the network collaborator travel as values so the session never
# needs a broad try/except around rendering.

TSuccess = typing.TypeVar("TSuccess")
TFailure = typing.TypeVar("TFailure", bound=Exception)


@dataclasses.dataclass(frozen=True, slots=True)
class Success(typing.Generic[TSuccess]):
    """A successful result."""

    value: TSuccess


@dataclasses.dataclass(frozen=True, slots=True)
class Failure(typing.Generic[TFailure]):
    """A failed result, containing the error."""

    error: TFailure


Result = Success[TSuccess] | Failure[TFailure]

# --- Enumerations ---


class HostKind(enum.Enum):
    """The document-editing application embedding the assistant."""

    TEXT_EDITOR = "text_editor"
    SPREADSHEET = "spreadsheet"
    PRESENTATION = "presentation"
    UNKNOWN = "unknown"


class ContentKind(enum.Enum):
    """What shape of content a response represents."""

    FORMULA = "formula"
    TABULAR_DATA = "tabular_data"
    CHART_REQUEST = "chart_request"
    SLIDE_DECK = "slide_deck"
    PLAIN_TEXT = "plain_text"


class TextFormat(enum.Enum):
    """How text is inserted into a host."""

    RICH = "rich"
    PLAIN = "plain"


class ChartKind(enum.Enum):
    """Chart types a spreadsheet host can create."""

    COLUMN = "column"
    BAR = "bar"
    LINE = "line"
    PIE = "pie"


# Opaque reference to "whatever the host currently has selected".
ACTIVE_SELECTION: typing.Final = "@selection"

# --- Core Data Models ---


@dataclasses.dataclass(frozen=True, slots=True)
class DataGrid:
    """Rows of string cells parsed from delimited text.

    The first row is authoritative for the column count. Rows with a
    different length are kept as they are; no padding is applied.
    """

    rows: tuple[tuple[str, ...], ...] = ()

    def __post_init__(self) -> None:
        """Validate that rows are tuples of strings."""
        _require(
            condition=isinstance(self.rows, tuple)
            and all(_is_tuple_of(row, str) for row in self.rows),
            message="must be a tuple of tuples of str",
            field_name="rows",
            exc=TypeError,
        )

    @classmethod
    def from_rows(cls, rows: typing.Iterable[typing.Iterable[str]]) -> DataGrid:
        """Build a grid from any iterable of row iterables."""
        return cls(tuple(tuple(row) for row in rows))

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def is_empty(self) -> bool:
        return not self.rows

    def to_lists(self) -> list[list[str]]:
        """Return a mutable copy of the grid as nested lists."""
        return [list(row) for row in self.rows]


@dataclasses.dataclass(frozen=True, slots=True)
class SlideRecord:
    """One slide's title and bullet content, before it is written."""

    title: str
    bullets: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants for type safety."""
        _require(
            condition=isinstance(self.title, str),
            message="must be str",
            field_name="title",
            exc=TypeError,
        )
        _require(
            condition=_is_tuple_of(self.bullets, str),
            message="must be a tuple of str",
            field_name="bullets",
            exc=TypeError,
        )


# Ordered in presentation order; the first record becomes the first new slide.
SlideDeck: typing.TypeAlias = tuple[SlideRecord, ...]


@dataclasses.dataclass(frozen=True, slots=True)
class ChartSpec:
    """A transient chart request for a single spreadsheet write."""

    kind: ChartKind
    title: str = "Generated Chart"
    source_range: str = ACTIVE_SELECTION


@dataclasses.dataclass(frozen=True, slots=True)
class WriteOutcome:
    """Result of one host write, as seen by the pipeline.

    Attributes:
        succeeded: Whether the document is in the intended state.
        error_detail: Diagnostic text for failures (or the skip reason).
        skipped: True when nothing was written on purpose.
        fallback_used: True when the plain-text fallback produced this outcome.
    """

    succeeded: bool
    error_detail: str | None = None
    skipped: bool = False
    fallback_used: bool = False

    @classmethod
    def ok(cls, *, fallback_used: bool = False) -> WriteOutcome:
        return cls(succeeded=True, fallback_used=fallback_used)

    @classmethod
    def failed(cls, detail: str, *, fallback_used: bool = False) -> WriteOutcome:
        return cls(succeeded=False, error_detail=detail, fallback_used=fallback_used)

    @classmethod
    def skip(cls, reason: str) -> WriteOutcome:
        return cls(succeeded=True, error_detail=reason, skipped=True)


@dataclasses.dataclass(frozen=True, slots=True)
class ChatReply:
    """A rendered reply from the chat layer.

    Error replies carry the rendered error text and are never inserted.
    """

    text: str
    is_error: bool = False
