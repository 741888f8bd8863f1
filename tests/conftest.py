# ABOUTME: Shared test fixtures for the forecast service test suite.
# ABOUTME: Provides settings, an in-memory cache, and a WeatherDeps factory around mock HTTP clients.

import pytest
from helpers import FORECAST_URL, GEOCODING_URL, mock_client

from src.cache import MemoryCache
from src.config import Settings
from src.deps import WeatherDeps


@pytest.fixture
def settings() -> Settings:
    return Settings(geocoding_base_url=GEOCODING_URL, forecast_base_url=FORECAST_URL)


@pytest.fixture
def cache() -> MemoryCache:
    return MemoryCache()


@pytest.fixture
def make_deps(settings, cache):
    """Factory building WeatherDeps around a mock client with the given responses."""

    def _make(*responses) -> WeatherDeps:
        return WeatherDeps(settings=settings, http_client=mock_client(*responses), cache=cache)

    return _make
