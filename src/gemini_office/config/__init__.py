"""Configuration management for the Gemini office assistant.

Resolve-once, freeze-then-flow:
- ResolvedConfig: post-resolution configuration with audit metadata
- FrozenConfig: immutable configuration handed to runtime components
- SourceMap: audit tracking of configuration value origins
"""

from .api import list_available_profiles, resolve_config, resolve_frozen_config
from .env_loader import EnvironmentConfigLoader
from .file_loader import ConfigFileError, FileConfigLoader
from .resolver import ConfigResolver
from .schema import OfficeSettings
from .types import ConfigOrigin, FrozenConfig, ResolvedConfig, SourceMap

__all__ = [
    "ConfigFileError",
    "ConfigOrigin",
    "ConfigResolver",
    "EnvironmentConfigLoader",
    "FileConfigLoader",
    "FrozenConfig",
    "OfficeSettings",
    "ResolvedConfig",
    "SourceMap",
    "list_available_profiles",
    "resolve_config",
    "resolve_frozen_config",
]
