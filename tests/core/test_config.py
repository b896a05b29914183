"""
Unit tests for settings loading.
"""

import pytest
from pydantic import ValidationError

from user_service.core.config import Settings


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        monkeypatch.delenv("PYTHON_ENV", raising=False)
        monkeypatch.delenv("REPOSITORY_TIMEOUT_SECONDS", raising=False)
        settings = Settings(_env_file=None)
        assert settings.database_url.startswith("postgresql+asyncpg://")
        assert settings.repository_timeout_seconds == 10.0
        assert settings.is_development

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///./users.db")
        monkeypatch.setenv("PYTHON_ENV", "production")
        monkeypatch.setenv("REPOSITORY_TIMEOUT_SECONDS", "2.5")

        settings = Settings(_env_file=None)

        assert settings.database_url == "sqlite+aiosqlite:///./users.db"
        assert settings.is_production
        assert not settings.is_development
        assert settings.repository_timeout_seconds == 2.5

    def test_empty_env_values_fall_back_to_defaults(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "")
        assert Settings(_env_file=None).log_level == "INFO"

    def test_timeout_must_be_positive(self, monkeypatch):
        monkeypatch.setenv("REPOSITORY_TIMEOUT_SECONDS", "0")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)
