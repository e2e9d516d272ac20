"""Host document adapters: protocols plus .docx, .xlsx and .pptx backends."""

from .addressing import resize_range, top_left
from .base import (
    ContextReader,
    DocumentHost,
    PresentationHost,
    SpreadsheetHost,
    TextHost,
)
from .docx_host import DocxHost
from .pptx_host import PptxHost
from .registry import FileHost, host_kind_for, open_host
from .xlsx_host import XlsxHost

__all__ = [
    "ContextReader",
    "DocumentHost",
    "DocxHost",
    "FileHost",
    "PptxHost",
    "PresentationHost",
    "SpreadsheetHost",
    "TextHost",
    "XlsxHost",
    "host_kind_for",
    "open_host",
    "resize_range",
    "top_left",
]
