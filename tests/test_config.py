# ABOUTME: Contract tests for startup configuration loading.
# ABOUTME: Validates required provider URLs fail fast and optional values default sensibly.

import pytest

from src.config import CACHE_TTL_SECONDS, ConfigurationError, load_settings

ENV = {"GEOCODING_BASE_URL": "https://geocode.test/search", "FORECAST_BASE_URL": "https://forecast.test/v1/forecast"}


class TestLoadSettings:
    def test_reads_required_urls(self):
        settings = load_settings(ENV)

        assert settings.geocoding_base_url == "https://geocode.test/search"
        assert settings.forecast_base_url == "https://forecast.test/v1/forecast"
        assert settings.cache_ttl_seconds == CACHE_TTL_SECONDS == 1800
        assert settings.cache_url is None
        assert settings.log_level == "INFO"

    @pytest.mark.parametrize("missing", ["GEOCODING_BASE_URL", "FORECAST_BASE_URL"])
    def test_missing_url_fails_fast(self, missing):
        """A missing provider URL raises ConfigurationError rather than failing per request.

        Implementation: Removes one required variable from the environment mapping.
        Passing implies: Misconfiguration is caught at startup.
        """
        env = {k: v for k, v in ENV.items() if k != missing}
        with pytest.raises(ConfigurationError, match=missing):
            load_settings(env)

    def test_blank_url_fails_fast(self):
        with pytest.raises(ConfigurationError):
            load_settings({**ENV, "FORECAST_BASE_URL": "  "})

    def test_optional_values(self):
        settings = load_settings({**ENV, "CACHE_URL": "redis://localhost:6379/0", "LOG_LEVEL": "debug"})

        assert settings.cache_url == "redis://localhost:6379/0"
        assert settings.log_level == "DEBUG"

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("GEOCODING_BASE_URL", "https://env.geocode/search")
        monkeypatch.setenv("FORECAST_BASE_URL", "https://env.forecast/v1")
        monkeypatch.delenv("CACHE_URL", raising=False)

        settings = load_settings()
        assert settings.geocoding_base_url == "https://env.geocode/search"
