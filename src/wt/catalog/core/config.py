# wt/catalog/core/config.py
"""
Central configuration for the hotel catalog API.

Environment variables (prefixed ``WT_CATALOG_``) override defaults.
Data clients themselves are declared in YAML (see ``config/clients.yaml``);
the index URL here only backs the default client setup.
"""
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from wt.catalog.core.fields import DEFAULT_HOTEL_FIELDS, DEFAULT_HOTELS_FIELDS


class Settings(BaseSettings):
    """Environment-driven settings with sensible defaults."""

    model_config = SettingsConfigDict(
        env_prefix="WT_CATALOG_",
        env_file=".env",
        extra="ignore",
    )

    app_env: str = "dev"
    version: str = "0.1.0"
    log_level: str = "INFO"
    log_format: str = Field(default="text", description="'text' or 'json'")

    base_url: str = Field(
        default="",
        description="Public base URL prepended to pagination links",
    )
    docs_url: str = "https://github.com/windingtree/wt-nodejs-api/blob/master/README.md"
    info_url: str = "https://github.com/windingtree/wt-nodejs-api"

    clients_config_paths: list[str] = Field(
        default_factory=lambda: ["config/clients.yaml"]
    )
    index_api_url: str = Field(
        default="http://localhost:3000",
        description="Index API used when no clients config is found",
    )
    http_timeout: float = Field(default=30.0, gt=0)

    default_hotels_fields: str = DEFAULT_HOTELS_FIELDS
    default_hotel_fields: str = DEFAULT_HOTEL_FIELDS

    max_backfill_rounds: int = Field(
        default=64,
        ge=1,
        description="Upper bound on windows pulled to fill one listing page",
    )


settings = Settings()
