"""Unit tests for Settings."""

import pytest
from pydantic import ValidationError

from orgmapper.core.config import Settings


class TestSettingsDefaults:
    """Test default settings values."""

    def test_defaults(self, monkeypatch):
        """Test settings load without any environment."""
        for name in ("LOG_LEVEL", "LOG_FORMAT", "ENVIRONMENT", "DEPARTMENT_ORGANIZATION_SUFFIX"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.department_organization_suffix == "_DEPT"
        assert settings.employee_name_separator == ""
        assert settings.log_level == "INFO"
        assert settings.log_file_enabled is False
        assert settings.is_development is True
        assert settings.is_production is False


class TestSettingsEnvironment:
    """Test settings loaded from environment variables."""

    def test_env_overrides(self, monkeypatch):
        """Test environment variables override defaults case-insensitively."""
        monkeypatch.setenv("department_organization_suffix", "_UNIT")
        monkeypatch.setenv("LOG_FORMAT", "json")

        settings = Settings(_env_file=None)

        assert settings.department_organization_suffix == "_UNIT"
        assert settings.log_format == "json"

    def test_invalid_log_level_rejected(self, monkeypatch):
        """Test an unknown log level fails validation."""
        monkeypatch.setenv("LOG_LEVEL", "LOUD")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)
