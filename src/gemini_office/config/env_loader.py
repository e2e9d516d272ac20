"""Environment variable configuration loading.

This module handles loading configuration from environment variables with
the GEMINI_OFFICE_ prefix, including optional .env file support and type coercion.
"""

import os
from pathlib import Path
from typing import Any

from .schema import OfficeSettings

ENV_PREFIX = "GEMINI_OFFICE_"

# Environment variable -> settings field
ENV_FIELDS = {
    f"{ENV_PREFIX}{name.upper()}": name for name in OfficeSettings.model_fields
}


class EnvironmentConfigLoader:
    """Loads configuration from GEMINI_OFFICE_* environment variables.

    Also handles optional .env files, with proper type coercion.
    """

    def load_env_config(self, env_file: str | Path | None = None) -> dict[str, Any]:
        """Load configuration from environment variables.

        Args:
            env_file: Optional path to .env file to load first.
                     If provided, values from this file are loaded into
                     the environment before reading GEMINI_OFFICE_* variables.

        Returns:
            Dictionary of configuration values found in environment.
            Only includes fields that are actually set (not defaults).

        Raises:
            ValueError: If environment variables contain invalid values.
        """
        if env_file:
            self._load_env_file(env_file)

        env_values = {
            field_name: os.environ[env_var]
            for env_var, field_name in ENV_FIELDS.items()
            if env_var in os.environ
        }
        if not env_values:
            return {}

        # Use Pydantic to parse and validate the environment values
        try:
            settings = OfficeSettings(**env_values)
        except Exception as e:
            env_var_list = [
                f"{env_var}=<redacted>" if "API_KEY" in env_var else f"{env_var}={os.environ[env_var]}"
                for env_var, field_name in ENV_FIELDS.items()
                if field_name in env_values
            ]
            raise ValueError(
                f"Invalid environment variable values: {', '.join(env_var_list)}. "
                f"Error: {e}"
            ) from e

        return {field_name: getattr(settings, field_name) for field_name in env_values}

    def _load_env_file(self, env_file: str | Path) -> None:
        """Load environment variables from a .env file.

        Existing environment variables are never overridden.

        Raises:
            FileNotFoundError: If the .env file doesn't exist.
            ValueError: If the .env file has invalid format.
        """
        env_path = Path(env_file)
        if not env_path.exists():
            raise FileNotFoundError(f"Environment file not found: {env_path}")

        try:
            with env_path.open(encoding="utf-8") as f:
                for line_num, raw_line in enumerate(f, 1):
                    line = raw_line.strip()

                    # Skip empty lines and comments
                    if not line or line.startswith("#"):
                        continue

                    if "=" not in line:
                        raise ValueError(
                            f"Invalid format at line {line_num}: {line}. "
                            "Expected KEY=VALUE format."
                        )

                    key, value = line.split("=", 1)
                    key = key.strip()
                    value = value.strip()

                    if (value.startswith('"') and value.endswith('"')) or (
                        value.startswith("'") and value.endswith("'")
                    ):
                        value = value[1:-1]

                    if key not in os.environ:
                        os.environ[key] = value

        except OSError as e:
            raise ValueError(f"Failed to read environment file {env_path}: {e}") from e
