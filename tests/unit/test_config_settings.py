"""Unit tests for application settings."""

import pytest
from pydantic import ValidationError

from trustgate.config import Settings, get_settings


class TestSettingsDefaults:
    """Tests for default settings values."""

    def test_defaults(self, monkeypatch):
        """Test defaults select the mock provider and a local SQLite database."""
        for name in ("USE_CHECKR", "CHECKR_API_KEY", "DATABASE_URL", "ENVIRONMENT"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.ENVIRONMENT == "development"
        assert settings.DATABASE_URL == "sqlite+aiosqlite:///./trustgate.db"
        assert settings.use_checkr is False
        assert settings.checkr_api_key is None
        assert settings.checkr_base_url == "https://api.checkr.com/v1"
        assert settings.provider_timeout_seconds is None


class TestSettingsFromEnvironment:
    """Tests for loading settings from environment variables."""

    def test_checkr_settings_from_env(self, monkeypatch):
        """Test USE_CHECKR and CHECKR_API_KEY are read from the environment."""
        monkeypatch.setenv("USE_CHECKR", "true")
        monkeypatch.setenv("CHECKR_API_KEY", "env-key")

        settings = Settings(_env_file=None)

        assert settings.use_checkr is True
        assert settings.checkr_api_key.get_secret_value() == "env-key"

    def test_api_key_is_secret(self, monkeypatch):
        """Test the API key is masked in the settings repr."""
        monkeypatch.setenv("CHECKR_API_KEY", "env-key")

        settings = Settings(_env_file=None)

        assert "env-key" not in repr(settings)

    def test_timeout_from_env(self, monkeypatch):
        """Test the provider timeout is parsed as a float."""
        monkeypatch.setenv("PROVIDER_TIMEOUT_SECONDS", "1.5")

        assert Settings(_env_file=None).provider_timeout_seconds == 1.5

    def test_invalid_environment_rejected(self, monkeypatch):
        """Test an unknown ENVIRONMENT value is rejected."""
        monkeypatch.setenv("ENVIRONMENT", "moon")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestGetSettings:
    """Tests for the cached settings accessor."""

    def test_cached(self):
        """Test get_settings returns the same instance."""
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
