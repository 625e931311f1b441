"""
Central application configuration using pydantic-settings.

This module provides typed access to environment-based configuration for
the orchestrator dashboard: the Dash server itself and the orchestrator
API it talks to.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("debug", "info", "warn", "error")


class DashboardSettings(BaseSettings):
    """
    Configuration for the dashboard and the orchestrator API endpoint.

    Environment variables:
        DASHBOARD_HOST           - Host for Dash server (default: 127.0.0.1)
        DASHBOARD_PORT           - Port for Dash server (default: 8050)
        DASHBOARD_DEBUG          - Run Dash in debug mode (default: false)
        ORCHESTRATOR_URL         - Origin of the orchestrator API server (default: http://localhost:8080)
        ORCHESTRATOR_API_KEY     - Optional API key sent as X-API-Key
        LOG_LEVEL                - debug | info | warn | error (default: info)
        OVERVIEW_REFRESH_SECONDS - Overview auto-refresh period (default: 30)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    dashboard_host: str = Field(default="127.0.0.1", alias="DASHBOARD_HOST")
    dashboard_port: int = Field(default=8050, ge=1, le=65535, alias="DASHBOARD_PORT")
    dashboard_debug: bool = Field(default=False, alias="DASHBOARD_DEBUG")

    orchestrator_url: str = Field(
        default="http://localhost:8080",
        alias="ORCHESTRATOR_URL",
        description="Origin of the orchestrator API server (without /api/v1).",
    )
    api_key: Optional[SecretStr] = Field(
        default=None,
        alias="ORCHESTRATOR_API_KEY",
        description="API key for the orchestrator's /api/v1 routes.",
    )

    log_level: str = Field(default="info", alias="LOG_LEVEL")
    overview_refresh_seconds: float = Field(
        default=30.0,
        gt=0,
        alias="OVERVIEW_REFRESH_SECONDS",
        description="How often the overview page re-queries the API.",
    )

    @field_validator("orchestrator_url", mode="after")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        """Keep the origin bare so the /api/v1 prefix is appended verbatim."""
        return value.rstrip("/")

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, value: Optional[str]) -> str:
        if not value:
            return "info"
        value = str(value).lower()
        if value not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}; got {value!r}")
        return value


@lru_cache
def get_dashboard_settings() -> DashboardSettings:
    """Return cached dashboard settings instance."""
    return DashboardSettings()
