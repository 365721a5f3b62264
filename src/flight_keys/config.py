"""Flight key store configuration via environment variables."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class FlightKeysSettings(BaseSettings):
    """Settings loaded from environment / .env file."""

    model_config = SettingsConfigDict(
        env_prefix="FLIGHT_KEYS_", env_file=".env", extra="ignore"
    )

    # Shared table backend ("memory" keeps everything process-local)
    backend: Literal["redis", "memory"] = "redis"
    redis_url: str = "redis://localhost:6379/0"
    socket_timeout: float = 2.0  # seconds

    # Every key written by both apps lives under this prefix
    namespace: str = "group.com.bulletproof.cxshared"

    # Flight numbers
    airline_prefix: str = "CX"

    # Directory holding airportAliases.json / airports.json / timezones.json.
    # Empty means the bundled datasets.
    dataset_dir: str | None = None


settings = FlightKeysSettings()
