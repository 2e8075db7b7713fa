"""Environment variables consumed by the catalog service.

config.yaml references these through ``${VAR:-default}`` placeholders; this
model documents them and gives typed access for scripts and tests.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvironmentVariables(BaseSettings):
    """Simple primitive values loaded from environment variables and .env files."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    # Environment and deployment
    environment: Literal["development", "production", "test"] = Field(
        default="development", validation_alias="APP_ENVIRONMENT"
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    # Infrastructure URLs
    database_url: str = Field(
        default="sqlite:///./catalog.db", validation_alias="DATABASE_URL"
    )
    base_url: str = Field(default="http://localhost:8000", validation_alias="BASE_URL")
    port: int = Field(default=8000, validation_alias="PORT")
