"""Package configuration using Pydantic settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SONAR_",
        extra="ignore",
    )

    environment: Literal["local", "test", "staging", "production"] = Field(default="local")
    service_name: str = Field(default="sonar-installations")
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=True)

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.strip().upper()

    @field_validator("service_name", mode="before")
    @classmethod
    def default_blank_service_name(cls, value: str | None) -> str:
        if value is None or not str(value).strip():
            return "sonar-installations"
        return value


@lru_cache
def get_settings() -> AppSettings:
    """Return cached settings instance."""

    return AppSettings()
