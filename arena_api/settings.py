"""Application settings loaded from environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings for the FastAPI simulation service."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    default_seed: int = Field(default=42, ge=0, le=0xFFFFFFFF, alias="DEFAULT_SEED")
    max_steps: int = Field(default=100_000, gt=0, alias="MAX_STEPS")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    cors_origins: list[str] = Field(default_factory=lambda: ["*"], alias="CORS_ORIGINS")
