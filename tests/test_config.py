"""Tests for configuration management."""

import pytest
from pydantic import ValidationError

from authcore.config import Settings


class TestConfiguration:
    """Test configuration loading and defaults."""

    def test_settings_loads(self):
        """Settings should load without errors."""
        settings = Settings()
        assert settings is not None

    def test_default_database_path(self, monkeypatch):
        """Default database path should be set."""
        monkeypatch.delenv("DATABASE_PATH", raising=False)
        settings = Settings(_env_file=None)
        assert settings.database_path == "./data/authcore.db"

    def test_default_listen_address(self, monkeypatch):
        """Default listen address should be 0.0.0.0:8080."""
        monkeypatch.delenv("HOST", raising=False)
        monkeypatch.delenv("PORT", raising=False)
        settings = Settings(_env_file=None)
        assert settings.host == "0.0.0.0"
        assert settings.port == 8080

    def test_default_work_factor(self, monkeypatch):
        """Default bcrypt work factor should be 10."""
        monkeypatch.delenv("BCRYPT_WORK_FACTOR", raising=False)
        settings = Settings(_env_file=None)
        assert settings.bcrypt_work_factor == 10

    def test_env_overrides(self, monkeypatch):
        """Environment variables should override defaults."""
        monkeypatch.setenv("DATABASE_PATH", "/tmp/other.db")
        monkeypatch.setenv("PORT", "9090")
        monkeypatch.setenv("BCRYPT_WORK_FACTOR", "12")
        settings = Settings(_env_file=None)
        assert settings.database_path == "/tmp/other.db"
        assert settings.port == 9090
        assert settings.bcrypt_work_factor == 12

    def test_env_is_case_insensitive(self, monkeypatch):
        """Lowercase environment names should be read."""
        monkeypatch.setenv("log_level", "DEBUG")
        settings = Settings(_env_file=None)
        assert settings.log_level == "DEBUG"

    @pytest.mark.parametrize("work_factor", [3, 32])
    def test_work_factor_out_of_range_rejected(self, work_factor):
        """Work factors outside bcrypt's range should be rejected."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, bcrypt_work_factor=work_factor)

    def test_cors_origins_is_list(self):
        """CORS origins should be a list."""
        settings = Settings(_env_file=None)
        assert isinstance(settings.cors_origins, list)
