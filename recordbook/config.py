"""
Configuration and settings for the record book backend.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-backed settings for the FastAPI service."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    api_prefix: str = Field(default="")
    log_level: str = Field(default="INFO")
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Document store (Postgres expected, e.g. postgresql+psycopg://...)
    database_url: Optional[str] = Field(default=None)
    store_timeout_seconds: float = Field(default=10.0, gt=0)

    # Development toggles
    use_in_memory_backends: bool = Field(default=False)
    dev_signin_enabled: bool = Field(default=False)

    # Bearer token verification
    jwt_secret: str = Field(default="AccessToken")
    jwt_algorithm: str = Field(default="HS256")
    jwt_audience: Optional[str] = Field(default=None)
    jwt_issuer: Optional[str] = Field(default=None)
    token_ttl_minutes: int = Field(default=60, ge=1)

    # UPC product lookup
    upc_endpoint: str = Field(default="https://api.upcdatabase.org/")
    upc_api_key: Optional[str] = Field(default=None)
    upc_timeout_seconds: float = Field(default=5.0, gt=0)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
