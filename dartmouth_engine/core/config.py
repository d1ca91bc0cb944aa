"""Application configuration loaded via Pydantic settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed configuration sourced from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    DARTMOUTH_LOG_LEVEL: str = Field(default="info")
    DARTMOUTH_LOG_DIR: Path | None = Field(default=None)
    DARTMOUTH_LOG_SCHEMA_VERSION: str = Field(default="1.0.0")
    DATA_DIR: Path = Field(default=Path("/data"))

    # Seed shared by the handlers that pick among response templates.
    RESPONSE_RANDOM_SEED: int | None = Field(default=None)
    HANDLER_FAILURE_MESSAGE: str = Field(
        default=(
            "I'm sorry, something went wrong while I was working on that. "
            "Could you try again in a moment?"
        )
    )


settings = Settings()
config = settings  # Alias for backward compatibility


__all__ = ["Settings", "settings", "config"]
