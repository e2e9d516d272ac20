"""Configuration schema and validation using Pydantic.

This module defines the settings schema that validates and coerces configuration
values from various sources (environment, files, programmatic) into the correct
types with proper defaults.
"""

from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from gemini_office.constants import (
    DEFAULT_BAR_KEYWORDS,
    DEFAULT_CHART_KEYWORDS,
    DEFAULT_CHART_TITLE,
    DEFAULT_LINE_KEYWORDS,
    DEFAULT_MAX_CONTEXT_CHARS,
    DEFAULT_MODEL,
    DEFAULT_PREAMBLE_TOKENS,
    DEFAULT_TIMEOUT_SECONDS,
    ERROR_GLYPH,
)

# Keyword lists may arrive as "a, b, c" from the environment or as TOML arrays.
KeywordTuple = Annotated[tuple[str, ...], NoDecode]

KEYWORD_FIELDS = ("preamble_tokens", "chart_keywords", "line_keywords", "bar_keywords")


class OfficeSettings(BaseSettings):
    """Pydantic settings schema for the office assistant.

    This handles validation, type coercion, and default values for all
    configuration fields. It integrates with environment variables using
    the GEMINI_OFFICE_ prefix.
    """

    model_config = SettingsConfigDict(
        env_prefix="GEMINI_OFFICE_",
        env_file=None,  # Only used when explicitly requested
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore unknown env vars for forward compatibility
    )

    # --- Endpoint ---

    api_key: str | None = Field(
        default=None,
        description="Google Gemini API key",
    )

    model: str = Field(
        default=DEFAULT_MODEL,
        description="Gemini model identifier",
        min_length=1,
    )

    timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        description="Request timeout for the generative model call",
        gt=0,
    )

    max_context_chars: int = Field(
        default=DEFAULT_MAX_CONTEXT_CHARS,
        description="Upper bound on document context sent with each request",
        ge=0,
    )

    # --- Materialization ---

    error_prefix: str = Field(
        default=ERROR_GLYPH,
        description="Replies starting with this prefix are never inserted",
        min_length=1,
    )

    preamble_tokens: KeywordTuple = Field(default=DEFAULT_PREAMBLE_TOKENS)
    chart_keywords: KeywordTuple = Field(default=DEFAULT_CHART_KEYWORDS)
    line_keywords: KeywordTuple = Field(default=DEFAULT_LINE_KEYWORDS)
    bar_keywords: KeywordTuple = Field(default=DEFAULT_BAR_KEYWORDS)

    chart_title: str = Field(default=DEFAULT_CHART_TITLE, min_length=1)

    # --- Validation Rules ---

    @field_validator(*KEYWORD_FIELDS, mode="before")
    @classmethod
    def split_keywords(cls, v: Any) -> Any:
        """Accept comma-separated strings and normalize to lower-case tokens."""
        if isinstance(v, str):
            v = v.split(",")
        if isinstance(v, list | tuple):
            tokens = tuple(str(item).strip().lower() for item in v)
            return tuple(token for token in tokens if token)
        return v

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary suitable for SourceMap annotation.

        Returns:
            Dictionary with field names as keys and resolved values.
        """
        return {name: getattr(self, name) for name in type(self).model_fields}
