"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Data files
    offers_file: Path = Path("data/offers.json")
    payouts_file: Path = Path("data/offerPayouts.json")

    # Reject non-numeric amounts instead of storing NaN
    strict_numbers: bool = False

    # Logging
    log_level: str = "WARNING"

    @field_validator("log_level", mode="after")
    @classmethod
    def _upper_log_level(cls, v: str) -> str:
        return (v or "WARNING").upper()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
