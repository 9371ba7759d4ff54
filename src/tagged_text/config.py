"""Configuration management for Tagged Text."""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        alias="TAGGED_TEXT_LOG_LEVEL",
    )

    # What to do with tags placed inside tags
    nesting: Literal["flatten", "reject"] = Field(
        default="flatten",
        alias="TAGGED_TEXT_NESTING",
    )

    # Used when a display config leaves the scale factor unset
    text_scale_factor: float = Field(
        default=1.0,
        gt=0,
        alias="TAGGED_TEXT_SCALE_FACTOR",
    )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings
