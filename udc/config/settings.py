"""
Configuration Settings
======================

Centralized configuration using Pydantic V2 Settings.

Every field can be overridden with a ``UDC_``-prefixed environment
variable (``UDC_USER_SOURCE=database``) or a ``.env`` file.
"""

import logging
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from udc.core.constants import UserSourceKind


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_env: str = Field(default="development")
    app_debug: bool = Field(default=False)
    log_level: str = Field(default="WARNING")
    log_file: Optional[str] = Field(default=None)
    user_source: UserSourceKind = Field(default=UserSourceKind.STATIC)
    database_url: str = Field(default="sqlite:///:memory:")
    banner: str = Field(default="Hello World")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the level name and reject ones logging doesn't know."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v!r}")
        return level

    model_config = SettingsConfigDict(
        env_prefix="UDC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()


def get_settings() -> Settings:
    """Get the global settings instance."""
    return settings
