"""Gemini chat assistant for Word, Excel and PowerPoint documents."""

import importlib.metadata
import logging

from gemini_office.client import (
    Attachment,
    ChatRequest,
    GeminiChatClient,
    render_error,
)
from gemini_office.config import FrozenConfig, resolve_config, resolve_frozen_config
from gemini_office.core.types import (
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
from gemini_office.exceptions import (
    APIError,
    ConfigurationError,
    GeminiOfficeError,
    HostWriteError,
    MissingKeyError,
    NetworkError,
    RequestInProgressError,
    UnsupportedDocumentError,
)
from gemini_office.hosts import DocxHost, PptxHost, XlsxHost, open_host
from gemini_office.materialize import (
    ChartIntentDetector,
    ContentClassifier,
    MaterializationPipeline,
    SlideDeckParser,
    TabularParser,
)
from gemini_office.session import AssistantSession
from gemini_office.telemetry import TelemetryContext, TelemetryReporter

# Version handling
try:
    __version__ = importlib.metadata.version("gemini-office")
except importlib.metadata.PackageNotFoundError:
    __version__ = "development"

# Set up a null handler for the library's root logger.
# This prevents 'No handler found' errors if the consuming app has no logging configured.
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Public API
__all__ = [  # noqa: RUF022
    # Session and client
    "AssistantSession",
    "Attachment",
    "ChatRequest",
    "GeminiChatClient",
    "render_error",
    # Materialization
    "ChartIntentDetector",
    "ContentClassifier",
    "MaterializationPipeline",
    "SlideDeckParser",
    "TabularParser",
    # Hosts
    "DocxHost",
    "PptxHost",
    "XlsxHost",
    "open_host",
    # Configuration
    "FrozenConfig",
    "resolve_config",
    "resolve_frozen_config",
    # Core types
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
    # Exceptions
    "APIError",
    "ConfigurationError",
    "GeminiOfficeError",
    "HostWriteError",
    "MissingKeyError",
    "NetworkError",
    "RequestInProgressError",
    "UnsupportedDocumentError",
    # Telemetry (extension points)
    "TelemetryContext",
    "TelemetryReporter",
]
