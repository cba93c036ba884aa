"""
Chronassert Settings - Configuration management using Pydantic Settings.

Loads configuration from environment variables and .env files.
"""

import logging
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Find project root (where .env file is located)
PROJECT_ROOT = Path(__file__).parent.parent


class ChronassertSettings(BaseSettings):
    """
    Chronassert configuration settings.

    Settings are loaded from:
    1. Environment variables (highest priority)
    2. .env file in current directory
    3. Default values (lowest priority)
    """

    model_config = SettingsConfigDict(
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="CHRONASSERT_",  # All Chronassert env vars must start with CHRONASSERT_
    )

    # Logging Configuration
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR) (env: CHRONASSERT_LOG_LEVEL)",
    )

    # Failure Message Configuration
    repr_max_string: int = Field(
        default=200,
        description="Longest string shown in failure messages before truncation (env: CHRONASSERT_REPR_MAX_STRING)",
    )

    repr_max_length: int = Field(
        default=50,
        description="Most container items shown in failure messages (env: CHRONASSERT_REPR_MAX_LENGTH)",
    )

    repr_max_depth: int = Field(
        default=4,
        description="Deepest nesting shown in failure messages (env: CHRONASSERT_REPR_MAX_DEPTH)",
    )


# Global settings instance
_settings: ChronassertSettings | None = None


def get_settings() -> ChronassertSettings:
    """
    Get the global settings instance.

    Creates the settings instance on first call, then returns cached instance.

    Returns:
        ChronassertSettings instance
    """
    global _settings
    if _settings is None:
        _settings = ChronassertSettings()
    return _settings


def reload_settings() -> ChronassertSettings:
    """
    Reload settings from environment/files.

    Useful for testing or when .env file changes.

    Returns:
        Fresh ChronassertSettings instance
    """
    global _settings
    _settings = ChronassertSettings()
    return _settings


def configure_logging():
    """Configure logging based on settings."""
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
