"""Core configuration data types for the gemini_office package.

This module defines the fundamental data structures used throughout the configuration
system, following the resolve-once, freeze-then-flow pattern.
"""

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Literal, NamedTuple

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

# --- Source Tracking Types ---

ConfigOrigin = Literal["programmatic", "env", "file", "default"]
SourceMap = Mapping[str, ConfigOrigin]

_SECRET_FIELDS = frozenset({"api_key"})

# --- Core Configuration Data ---


class ResolvedConfig(NamedTuple):
    """Configuration after resolution from all sources, before freezing.

    This represents the validated, merged result of combining programmatic overrides,
    environment variables, files, and defaults. It includes audit metadata for
    observability.
    """

    api_key: str | None
    model: str
    timeout_seconds: float
    max_context_chars: int
    error_prefix: str
    preamble_tokens: tuple[str, ...]
    chart_keywords: tuple[str, ...]
    line_keywords: tuple[str, ...]
    bar_keywords: tuple[str, ...]
    chart_title: str

    # Audit metadata - tracks where each field value came from
    origin: SourceMap

    def __str__(self) -> str:
        """String representation with redacted API key for safe logging."""
        return f"ResolvedConfig({_render_fields(self)}, origin={dict(self.origin)!r})"

    def __repr__(self) -> str:
        """Repr with redacted API key for safe debugging."""
        return self.__str__()

    def to_frozen(self) -> "FrozenConfig":
        """Convert to the immutable configuration used at runtime.

        Returns:
            FrozenConfig with the same field values, excluding audit metadata.
        """
        values = self._asdict()
        values.pop("origin")
        return FrozenConfig(**values)

    def audit(self) -> str:
        """Generate a redacted audit report showing the origin of each field.

        Returns:
            Human-readable audit report with redacted sensitive fields.
        """
        lines = []
        for field in self._fields:
            if field == "origin" or field not in self.origin:
                continue
            origin = self.origin[field]
            value = getattr(self, field)
            if field in _SECRET_FIELDS:
                value_display = f"{origin}:None" if value is None else f"{origin}:<redacted>"
            elif origin == "env":
                value_display = f"env:GEMINI_OFFICE_{field.upper()}={_display(value)}"
            else:
                value_display = f"{origin}:{_display(value)}"
            lines.append(f"{field}: {value_display}")
        return "\n".join(lines)


@dataclass(frozen=True)
class FrozenConfig:
    """Immutable configuration handed to clients, parsers and the pipeline.

    Any attempt to modify this object will raise an exception. Defaults match
    the schema so components can be built without resolving configuration.
    """

    api_key: str | None = None
    model: str = DEFAULT_MODEL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    max_context_chars: int = DEFAULT_MAX_CONTEXT_CHARS
    error_prefix: str = ERROR_GLYPH
    preamble_tokens: tuple[str, ...] = DEFAULT_PREAMBLE_TOKENS
    chart_keywords: tuple[str, ...] = DEFAULT_CHART_KEYWORDS
    line_keywords: tuple[str, ...] = DEFAULT_LINE_KEYWORDS
    bar_keywords: tuple[str, ...] = DEFAULT_BAR_KEYWORDS
    chart_title: str = DEFAULT_CHART_TITLE

    def __str__(self) -> str:
        """String representation with redacted API key for safe logging."""
        return f"FrozenConfig({_render_fields(self)})"

    def __repr__(self) -> str:
        """Representation with redacted API key for safe debugging."""
        return self.__str__()


def _display(value: object) -> str:
    if isinstance(value, tuple):
        return ",".join(str(v) for v in value)
    return str(value)


def _render_fields(config: ResolvedConfig | FrozenConfig) -> str:
    names = (
        [f.name for f in fields(config)]
        if isinstance(config, FrozenConfig)
        else [n for n in config._fields if n != "origin"]
    )
    parts = []
    for name in names:
        value = getattr(config, name)
        if name in _SECRET_FIELDS and value:
            value = "[REDACTED]"
        parts.append(f"{name}={value!r}")
    return ", ".join(parts)
