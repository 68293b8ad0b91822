"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_AUTOCOMPLETE_URL = "https://www.cumtd.com/autocomplete/Stops/v1.0/json/search?query="


class SearchSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="STOPSEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    autocomplete_url: str = Field(
        default=DEFAULT_AUTOCOMPLETE_URL,
        description="Base endpoint; the normalized query is appended verbatim.",
    )
    request_timeout_seconds: float = Field(default=10, ge=1, le=60)
    discard_stale_responses: bool = True
    log_level: str = "INFO"

    @field_validator("autocomplete_url")
    @classmethod
    def _require_http_scheme(cls, value: str) -> str:
        value = value.strip()
        if not value.startswith(("http://", "https://")):
            raise ValueError("autocomplete_url must start with http:// or https://")
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.strip().upper() or "INFO"


@lru_cache
def get_settings() -> SearchSettings:
    """Return cached settings instance."""

    return SearchSettings()


__all__ = ["DEFAULT_AUTOCOMPLETE_URL", "SearchSettings", "get_settings"]
