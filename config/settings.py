"""Environment-driven configuration using Pydantic Settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """All configuration comes from environment variables / .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Okta ---
    okta_org: str = ""
    okta_domain: str = "okta.com"
    okta_api_token: str = ""
    okta_page_limit: int = Field(default=200, ge=1, le=200)
    # None leaves requests unbounded
    okta_timeout_seconds: float | None = Field(default=None, gt=0)
    okta_metrics_max_records: int = Field(default=1000, ge=1)

    # --- Observability ---
    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
