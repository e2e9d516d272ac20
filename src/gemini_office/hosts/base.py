"""Protocols describing the host document operations the assistant needs.

Host methods raise on failure (`HostWriteError` or the backing library's own
exceptions). Converting failures into `WriteOutcome` values is the writers'
job, not the host's.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from gemini_office.core.types import ChartKind, DataGrid, HostKind, TextFormat


@runtime_checkable
class TextHost(Protocol):
    async def insert_text(self, text: str, fmt: TextFormat) -> None: ...


@runtime_checkable
class SpreadsheetHost(TextHost, Protocol):
    """A grid-of-cells host addressed with A1 references."""

    @property
    def selection(self) -> str: ...

    @property
    def active_cell(self) -> str: ...

    async def insert_formula(self, formula: str, target_cell: str) -> None: ...

    async def insert_grid(self, grid: DataGrid, target_range: str) -> None: ...

    async def autofit_columns(self, target_range: str) -> None: ...

    async def insert_chart(self, kind: ChartKind, data_range: str, title: str) -> None: ...


@runtime_checkable
class PresentationHost(TextHost, Protocol):
    async def append_slide(self, title: str, body: str) -> None: ...


@runtime_checkable
class ContextReader(Protocol):
    """Read the current selection, or a bounded prefix of the document body."""

    async def read_context(self, max_chars: int) -> str: ...


@runtime_checkable
class DocumentHost(Protocol):
    """A host backed by a document file that can be saved."""

    @property
    def kind(self) -> HostKind: ...

    def save(self, path: str | Path | None = None) -> Path: ...
