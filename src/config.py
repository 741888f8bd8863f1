# ABOUTME: Startup configuration for the forecast service, read once from the environment.
# ABOUTME: Fails fast with ConfigurationError when a provider base URL is not configured.

import os
from collections.abc import Mapping

from dotenv import load_dotenv
from pydantic import BaseModel

CACHE_TTL_SECONDS = 30 * 60
USER_AGENT = "WeatherForecastApp/1.0"


class ConfigurationError(RuntimeError):
    """Raised at startup when required configuration is missing."""


class Settings(BaseModel):
    """Process-wide settings, constructed once and injected via WeatherDeps."""

    geocoding_base_url: str
    forecast_base_url: str
    cache_ttl_seconds: int = CACHE_TTL_SECONDS
    cache_url: str | None = None
    log_level: str = "INFO"


def _require(environ: Mapping[str, str], name: str) -> str:
    value = environ.get(name, "").strip()
    if not value:
        raise ConfigurationError(f"{name} must be set")
    return value


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from the environment (or an explicit mapping, for tests).

    A .env file is loaded first when reading the real process environment.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    return Settings(
        geocoding_base_url=_require(environ, "GEOCODING_BASE_URL"),
        forecast_base_url=_require(environ, "FORECAST_BASE_URL"),
        cache_url=environ.get("CACHE_URL") or None,
        log_level=environ.get("LOG_LEVEL", "INFO").upper(),
    )
