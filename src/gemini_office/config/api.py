"""Public API for the configuration system.

This module provides the main entry points for configuration resolution,
including the resolve_config() function and profile listing.
"""

from pathlib import Path
from typing import Any

from .resolver import ConfigResolver
from .types import FrozenConfig, ResolvedConfig

# Global resolver instance for efficient reuse
_resolver = ConfigResolver()


def resolve_config(
    programmatic: dict[str, Any] | None = None,
    *,
    profile: str | None = None,
    use_env_file: str | Path | None = None,
    project_root: Path | None = None,
) -> ResolvedConfig:
    """Resolve configuration from all sources with proper precedence.

    Precedence: Programmatic > Environment > Project file > Home file > Defaults

    Args:
        programmatic: Dictionary of programmatic overrides (highest precedence).
                     Only known configuration fields are used.
        profile: Profile name to load from configuration files. If None,
                uses GEMINI_OFFICE_PROFILE environment variable if set.
        use_env_file: Optional path to .env file to load before reading
                     environment variables.
        project_root: Directory to search for pyproject.toml. If None,
                     searches current directory and parents.

    Returns:
        ResolvedConfig with merged values and source tracking for audit.

    Raises:
        ValueError: If configuration validation fails or environment
                   variables contain invalid values.
        ConfigFileError: If configuration files exist but are malformed.

    Example:
        config = resolve_config({"model": "gemini-2.5-flash"})
        frozen = config.to_frozen()
    """
    return _resolver.resolve(
        programmatic=programmatic,
        profile=profile,
        use_env_file=use_env_file,
        project_root=project_root,
    )


def resolve_frozen_config(
    programmatic: dict[str, Any] | None = None, **kwargs: Any
) -> FrozenConfig:
    """Shortcut for ``resolve_config(...).to_frozen()``."""
    return resolve_config(programmatic, **kwargs).to_frozen()


def list_available_profiles(project_root: Path | None = None) -> dict[str, list[str]]:
    """List profiles defined in the project and home configuration files."""
    return _resolver.list_available_profiles(project_root)
