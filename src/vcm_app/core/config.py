"""
Centralized settings loader.

Values come from the environment (prefix `VCM_`) or a `.env` file in the
working directory. Nothing here touches the calculation engine; settings
only shape logging, the preference store and display formatting.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_NAME: str = Field("VCM Valuation Engine", description="Title shown in the OpenAPI docs")
    LOG_LEVEL: str = Field("INFO", description="DEBUG, INFO, WARNING, ERROR or CRITICAL")
    PREFERENCES_FILE: str = Field(
        "",
        description="JSON file for the display-theme preference; empty keeps it in memory for the session",
    )
    DEFAULT_DARK_MODE: bool = Field(False, description="Theme used when no preference has been stored")
    CURRENCY_SYMBOL: str = Field("€", description="Prefix for formatted money values")

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> str:
        if isinstance(v, str):
            return v.strip().upper()
        return v or "INFO"

    model_config = SettingsConfigDict(
        env_prefix="VCM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
