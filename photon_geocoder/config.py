"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- PHOTON_ROOT_URL=http://localhost:2322
- PHOTON_HTTP_TIMEOUT_SECONDS=5
- PHOTON_HTTP_USER_AGENT=my-app
- PHOTON_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

KOMOOT_ROOT_URL = "https://photon.komoot.io"


class PhotonConfig(BaseSettings):
    """Photon server configuration.

    Environment variables prefixed with PHOTON_.
    """

    model_config = SettingsConfigDict(env_prefix="PHOTON_")

    root_url: str = KOMOOT_ROOT_URL


class HttpConfig(BaseSettings):
    """HTTP client configuration.

    Environment variables prefixed with PHOTON_HTTP_.
    """

    model_config = SettingsConfigDict(env_prefix="PHOTON_HTTP_")

    user_agent: str = "photon-geocoder"
    timeout_seconds: float = 10.0


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with PHOTON_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="PHOTON_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main configuration aggregating all sub-configs.

        config = get_config()
        print(config.photon.root_url)
        print(config.http.timeout_seconds)
    """

    model_config = SettingsConfigDict(env_prefix="PHOTON_APP_")

    photon: PhotonConfig = Field(default_factory=PhotonConfig)
    http: HttpConfig = Field(default_factory=HttpConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
