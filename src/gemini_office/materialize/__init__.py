"""Response-to-document materialization: classify, parse, write."""

from .charts import ChartIntentDetector, ChartKeywordRule, default_chart_rules
from .classifier import ClassificationRule, ContentClassifier, default_rules
from .pipeline import DEFAULT_FALLBACK_KINDS, MaterializationPipeline
from .slides import SlideDeckParser, SlidePayload
from .tabular import TabularParser
from .text import is_error_response
from .writers import (
    HostWriter,
    PlainTextWriter,
    PresentationWriter,
    SpreadsheetWriter,
    TextEditorWriter,
    build_writer,
)

__all__ = [
    "DEFAULT_FALLBACK_KINDS",
    "ChartIntentDetector",
    "ChartKeywordRule",
    "ClassificationRule",
    "ContentClassifier",
    "HostWriter",
    "MaterializationPipeline",
    "PlainTextWriter",
    "PresentationWriter",
    "SlideDeckParser",
    "SlidePayload",
    "SpreadsheetWriter",
    "TabularParser",
    "TextEditorWriter",
    "build_writer",
    "default_chart_rules",
    "default_rules",
    "is_error_response",
]
