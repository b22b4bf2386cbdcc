"""Application settings using Pydantic."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="HIRING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Files
    input_file: Path = Path("input.txt")
    output_file: Path = Path("output.txt")
    encoding: str = "utf-8"

    # Logging
    log_level: str = "WARNING"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
