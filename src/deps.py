# ABOUTME: Dependency container for the forecast service using Pydantic BaseModel.
# ABOUTME: Holds the settings, the httpx.AsyncClient, and the cache store shared by requests.

import httpx
from pydantic import BaseModel, ConfigDict

from src.cache import CacheStore, create_cache
from src.config import Settings


class WeatherDeps(BaseModel):
    """Dependencies injected into the weather service functions."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    settings: Settings
    http_client: httpx.AsyncClient
    cache: CacheStore


def create_http_client() -> httpx.AsyncClient:
    """Create a plain httpx client. No retry transport: every upstream call is a single attempt."""
    return httpx.AsyncClient()


def create_deps(settings: Settings) -> WeatherDeps:
    return WeatherDeps(settings=settings, http_client=create_http_client(), cache=create_cache(settings))
