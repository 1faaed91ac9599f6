"""Configuration management using Pydantic Settings.

Settings are loaded from environment variables and an optional ``.env`` file.
The configuration is organized into logical groups:
- LoggingConfig: Logging levels and optional file output
- SortingConfig: Collation table for string sorting
"""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseModel):
    """Logging configuration for console and file output."""

    console_level: str = "INFO"
    file_level: str = "DEBUG"
    # No file sink unless a path is configured
    log_file: Path | None = None


class SortingConfig(BaseModel):
    """Song ordering configuration."""

    # Custom allkeys.txt for the Unicode collator; None uses the bundled table
    collation_table: Path | None = None


class Settings(BaseSettings):
    """Main application settings with environment variable support.

    Environment variables use nested naming, e.g. LOGGING__CONSOLE_LEVEL or
    SORTING__COLLATION_TABLE. Flat names (console_log_level, log_file,
    collation_table) are accepted as init keyword arguments or .env entries
    and mapped onto the nested groups.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    logging: LoggingConfig = LoggingConfig()
    sorting: SortingConfig = SortingConfig()

    @model_validator(mode="before")
    @classmethod
    def transform_flat_env_vars(cls, data: Any) -> Any:
        """Map flat init kwargs and .env keys onto the nested structure."""
        if not isinstance(data, dict):
            return data

        transformed = {}

        log_mapping = {
            "console_log_level": "console_level",
            "file_log_level": "file_level",
            "log_file": "log_file",
        }
        for env_key, field_key in log_mapping.items():
            if env_key in data:
                transformed.setdefault("logging", {})[field_key] = data.pop(env_key)

        if "collation_table" in data:
            transformed.setdefault("sorting", {})["collation_table"] = data.pop(
                "collation_table"
            )

        # Nested values given explicitly win over flat aliases
        for section, values in transformed.items():
            existing = data.get(section)
            if isinstance(existing, dict):
                data[section] = {**values, **existing}
            elif existing is None:
                data[section] = values

        return data


# Singleton instance for application use
settings = Settings()


# =============================================================================
# FLAT KEY ACCESS
# =============================================================================

_KEY_MAP = {
    "CONSOLE_LOG_LEVEL": lambda: settings.logging.console_level,
    "FILE_LOG_LEVEL": lambda: settings.logging.file_level,
    "LOG_FILE": lambda: settings.logging.log_file,
    "COLLATION_TABLE": lambda: settings.sorting.collation_table,
}


def get_config(key: str, default=None):
    """Get configuration value by flat key with optional default.

    Example:
        >>> get_config("COLLATION_TABLE")
    """
    if key in _KEY_MAP:
        return _KEY_MAP[key]()

    return default
