"""Configuration resolution with precedence handling.

This module implements the core resolution algorithm that merges configuration
from multiple sources according to the documented precedence order:
Programmatic > Environment > Project file > Home file > Defaults
"""

import logging
import os
from pathlib import Path
from typing import Any

from .env_loader import EnvironmentConfigLoader
from .file_loader import ConfigFileError, FileConfigLoader
from .schema import OfficeSettings
from .types import ConfigOrigin, ResolvedConfig

log = logging.getLogger(__name__)

PROFILE_ENV = "GEMINI_OFFICE_PROFILE"


class ConfigResolver:
    """Resolves configuration from multiple sources with proper precedence."""

    def __init__(self) -> None:
        """Initialize the configuration resolver."""
        self.file_loader = FileConfigLoader()
        self.env_loader = EnvironmentConfigLoader()

    def resolve(
        self,
        programmatic: dict[str, Any] | None = None,
        *,
        profile: str | None = None,
        use_env_file: str | Path | None = None,
        project_root: Path | None = None,
    ) -> ResolvedConfig:
        """Resolve configuration from all sources with proper precedence.

        Args:
            programmatic: Programmatic overrides (highest precedence)
            profile: Profile name to load from files
            use_env_file: Optional .env file to load
            project_root: Directory to search for pyproject.toml

        Returns:
            ResolvedConfig with merged values and source tracking.

        Raises:
            ValueError: If validation fails or environment values are invalid.
            ConfigFileError: If configuration files are malformed.
        """
        origins: dict[str, ConfigOrigin] = {}
        merged_config: dict[str, Any] = {}

        if profile is None:
            profile = os.getenv(PROFILE_ENV)

        # Step 1: Start with schema defaults (no settings sources consulted)
        for field, value in OfficeSettings.model_construct().to_dict().items():
            merged_config[field] = value
            origins[field] = "default"

        def _apply(values: dict[str, Any], origin: ConfigOrigin) -> None:
            for field, value in values.items():
                if field in merged_config:  # Only override known fields
                    merged_config[field] = value
                    origins[field] = origin

        # Step 2: Home file configuration (errors are non-fatal)
        try:
            _apply(self.file_loader.load_home_config(profile=profile), "file")
        except ConfigFileError as e:
            log.warning("Ignoring home configuration: %s", e)

        # Step 3: Project file configuration
        try:
            _apply(
                self.file_loader.load_project_config(
                    project_root=project_root, profile=profile
                ),
                "file",
            )
        except ConfigFileError:
            # Base configuration errors are raised, profile misses are skipped
            if profile is None:
                raise
            log.debug("Profile %r not present in project configuration", profile)

        # Step 4: Environment variables
        try:
            _apply(self.env_loader.load_env_config(env_file=use_env_file), "env")
        except (ValueError, FileNotFoundError) as e:
            raise ValueError(f"Environment configuration error: {e}") from e

        # Step 5: Programmatic overrides (highest precedence)
        if programmatic:
            _apply(programmatic, "programmatic")

        # Step 6: Validate the final configuration using Pydantic
        try:
            final_config = OfficeSettings(**merged_config).to_dict()
        except Exception as e:
            raise ValueError(f"Configuration validation failed: {e}") from e

        return ResolvedConfig(**final_config, origin=origins)

    def list_available_profiles(
        self, project_root: Path | None = None
    ) -> dict[str, list[str]]:
        """List all available profiles from project and home files."""
        return self.file_loader.list_available_profiles(project_root)
