"""Map document files to host adapters."""

from __future__ import annotations

from pathlib import Path
from typing import TypeAlias

from gemini_office.core.types import HostKind
from gemini_office.exceptions import UnsupportedDocumentError

from .docx_host import DocxHost
from .pptx_host import PptxHost
from .xlsx_host import XlsxHost

FileHost: TypeAlias = DocxHost | XlsxHost | PptxHost

_KINDS_BY_SUFFIX: dict[str, HostKind] = {
    ".docx": HostKind.TEXT_EDITOR,
    ".xlsx": HostKind.SPREADSHEET,
    ".pptx": HostKind.PRESENTATION,
}


def host_kind_for(path: str | Path) -> HostKind:
    """Host kind implied by a file suffix; `HostKind.UNKNOWN` if unrecognized."""
    return _KINDS_BY_SUFFIX.get(Path(path).suffix.lower(), HostKind.UNKNOWN)


def open_host(path: str | Path, *, selection: str | None = None) -> FileHost:
    """Open a document file as a host.

    Args:
        path: A ``.docx``, ``.xlsx`` or ``.pptx`` file. Missing files start empty.
        selection: Spreadsheet range to treat as the active selection.

    Raises:
        UnsupportedDocumentError: For any other file type.
    """
    kind = host_kind_for(path)
    if kind is HostKind.TEXT_EDITOR:
        return DocxHost.open(path)
    if kind is HostKind.SPREADSHEET:
        return XlsxHost.open(path, selection=selection)
    if kind is HostKind.PRESENTATION:
        return PptxHost.open(path)
    raise UnsupportedDocumentError(
        f"Unsupported document type {Path(path).suffix or '(none)'!r}; "
        "expected .docx, .xlsx or .pptx"
    )
