"""Application configuration.

Configuration is loaded from environment variables using pydantic-settings.
All variables use the ``SUNTIMES_`` prefix and may also be placed in a
``.env`` file.

## Optional Environment Variables

- SUNTIMES_DEFAULT_TIMEZONE_OFFSET: UTC offset in hours used when a caller
  supplies neither an explicit offset nor an aware datetime
  (default: the host's local offset)
- SUNTIMES_LOG_LEVEL: Logging level for the CLI (default: WARNING)
- SUNTIMES_DEBUG: Enable debug mode (default: false)

## Example .env file

```
SUNTIMES_DEFAULT_TIMEZONE_OFFSET=-5
SUNTIMES_LOG_LEVEL=INFO
```
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SUNTIMES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Suntimes"
    app_version: str = "0.1.0"
    debug: bool = False

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    # Localization
    default_timezone_offset: float | None = Field(
        default=None,
        ge=-14,
        le=14,
        description="UTC offset in hours used when none is supplied",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v

    @property
    def effective_log_level(self) -> str:
        """Log level, forced to DEBUG in debug mode."""
        return "DEBUG" if self.debug else self.log_level


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are loaded once and cached. To reload, clear the cache:
    ```python
    get_settings.cache_clear()
    ```
    """
    return Settings()
