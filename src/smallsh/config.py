"""Configuration management for smallsh."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging_utils import configure_logging


class Settings(BaseSettings):
    """Interpreter settings."""

    model_config = SettingsConfigDict(
        env_prefix="SMALLSH_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging Configuration
    log_level: str = Field(default="WARNING", description="Log level")

    # Parsing Configuration
    max_words: int = Field(default=1024, ge=1, description="Maximum number of words accepted on one line")
    truncate_on_parse: bool = Field(
        default=True, description="Create/truncate '>' targets while parsing instead of at exec time"
    )

    # Redirection Configuration
    create_mode: int = Field(default=0o777, ge=0, le=0o7777, description="Mode for files created by '>' and '>>'")


def get_settings() -> Settings:
    """Get interpreter settings and configure logging from them."""
    settings = Settings()
    configure_logging(settings.log_level)
    return settings
