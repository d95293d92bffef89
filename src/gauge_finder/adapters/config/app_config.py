"""12-factor configuration adapter using environment variables."""

import logging
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gauge_finder.adapters.flood_api.constants import FLOOD_API_BASE_URL
from gauge_finder.adapters.postcodes_api.constants import POSTCODES_API_BASE_URL


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Remote API configuration
    flood_api_base_url: str = Field(
        default=FLOOD_API_BASE_URL, description="Base URL of the flood-monitoring API"
    )
    postcodes_api_base_url: str = Field(
        default=POSTCODES_API_BASE_URL, description="Base URL of the postcode geocoding API"
    )
    api_timeout_seconds: float = Field(
        default=10.0, description="Timeout for remote API requests in seconds"
    )
    station_fetch_limit: int = Field(
        default=10000,
        description="Maximum number of stations requested when loading the full collection",
    )

    # Search configuration
    page_limit: int = Field(
        default=20, description="Number of stations displayed unless all are requested"
    )
    search_radius_km: float = Field(
        default=10.0, description="Radius of the postcode fallback search in kilometres"
    )
    min_search_length: int = Field(
        default=2, description="Search terms shorter than this (after trimming) are ignored"
    )

    log_level: str = Field(default="INFO", description="Logging level name")

    @field_validator("api_timeout_seconds", "search_radius_km")
    @classmethod
    def validate_positive_float(cls, v: float) -> float:
        """Validate timeouts and radii are positive."""
        if v <= 0:
            raise ValueError("must be greater than zero")
        return v

    @field_validator("station_fetch_limit", "page_limit", "min_search_length")
    @classmethod
    def validate_positive_int(cls, v: int) -> int:
        """Validate limits are positive."""
        if v < 1:
            raise ValueError("must be at least 1")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got {v!r}")
        return level

    @classmethod
    def for_testing(cls, **overrides: Any) -> "AppConfig":
        """Build a configuration that ignores any .env file."""
        return cls(_env_file=None, **overrides)
