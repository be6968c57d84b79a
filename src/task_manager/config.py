"""Configuration management using pydantic-settings.

Settings are read from environment variables with the TASK_MANAGER_ prefix
and from a .env file in the working directory. CLI options override both.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Environment variables use TASK_MANAGER_ prefix:
    - TASK_MANAGER_LOG_LEVEL
    - TASK_MANAGER_LOG_FORMAT
    """

    model_config = SettingsConfigDict(
        env_prefix="TASK_MANAGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging Configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Logging level",
    )
    log_format: Literal["json", "console"] = Field(
        default="console",
        description="Log output format",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
