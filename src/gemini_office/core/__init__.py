"""Core value types shared by every stage of the assistant."""

from gemini_office.core.types import (
    ACTIVE_SELECTION,
    ChartKind,
    ChartSpec,
    ChatReply,
    ContentKind,
    DataGrid,
    Failure,
    HostKind,
    Result,
    SlideDeck,
    SlideRecord,
    Success,
    TextFormat,
    WriteOutcome,
)

__all__ = [
    "ACTIVE_SELECTION",
    "ChartKind",
    "ChartSpec",
    "ChatReply",
    "ContentKind",
    "DataGrid",
    "Failure",
    "HostKind",
    "Result",
    "SlideDeck",
    "SlideRecord",
    "Success",
    "TextFormat",
    "WriteOutcome",
]
