"""12-factor configuration adapter using environment variables."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from efa_transit.domain.models.cache_ttls import CacheTtls


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # EFA API configuration
    efa_base_url: str = Field(
        default="https://efa.sta.bz.it/apb", description="Base URL of the EFA installation"
    )
    efa_api_timeout: float = Field(
        default=8.0, gt=0, description="Total timeout for EFA API requests in seconds"
    )
    efa_language: str = Field(default="de", description="Language of provider texts")
    efa_trip_count: int = Field(
        default=5, ge=1, description="Number of trips to request per route search"
    )
    efa_departure_limit: int = Field(
        default=20, ge=1, description="Maximum number of departures to request per stop"
    )

    # Cache configuration
    cache_backend: str = Field(default="redis", description="Cache backend: 'redis' or 'memory'")
    redis_url: str = Field(default="redis://localhost:6379", description="Redis connection URL")
    cache_timeout_seconds: float = Field(
        default=1.0, gt=0, description="Upper bound for a single cache operation in seconds"
    )
    cache_reconnect_interval_seconds: float = Field(
        default=30.0, gt=0, description="Minimum seconds between Redis readiness checks"
    )
    cache_ttl_route_seconds: int = Field(
        default=300, ge=1, description="Lifetime of cached route searches"
    )
    cache_ttl_stations_seconds: int = Field(
        default=3600, ge=1, description="Lifetime of cached station name searches"
    )
    cache_ttl_nearby_seconds: int = Field(
        default=3600, ge=1, description="Lifetime of cached proximity searches"
    )
    cache_ttl_departures_seconds: int = Field(
        default=60, ge=1, description="Lifetime of cached departure lists"
    )

    # Query defaults
    default_nearby_radius: int = Field(
        default=1000, ge=1, description="Radius in metres for proximity searches"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level name")

    @field_validator("cache_backend")
    @classmethod
    def validate_cache_backend(cls, v: str) -> str:
        """Validate cache backend is either 'redis' or 'memory'."""
        if v.lower() not in ("redis", "memory"):
            raise ValueError("cache_backend must be either 'redis' or 'memory'")
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"log_level must be a logging level name, got '{v}'")
        return level

    def cache_ttls(self) -> CacheTtls:
        """Per-endpoint cache lifetimes."""
        return CacheTtls(
            route=self.cache_ttl_route_seconds,
            stations=self.cache_ttl_stations_seconds,
            nearby=self.cache_ttl_nearby_seconds,
            departures=self.cache_ttl_departures_seconds,
        )
