"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting has a default: the server starts with no environment at all
    - get_settings() is cached (lru_cache) — single instance per process
    - Invalid port or log format fails at construction, not at first use
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Service identity
    app_name: str = "UserHub API"
    app_version: str = "1.0.0"
    welcome_message: str = "Welcome to the UserHub API"

    # Server
    host: str = "0.0.0.0"
    port: int = Field(3000, ge=1, le=65535)

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip().upper()
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
