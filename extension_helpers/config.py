"""Configuration loading for the command-line interface."""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """CLI defaults loaded from ``EXTENSION_HELPERS_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="EXTENSION_HELPERS_", env_file=".env", env_file_encoding="utf-8"
    )

    log_level: str = "WARNING"
    batch_size: int = Field(default=10, gt=0)
    shuffle_seed: Optional[int] = None
    separator: str = " "


@lru_cache
def get_settings() -> Settings:
    """Return cached settings."""
    return Settings()
