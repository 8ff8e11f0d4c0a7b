"""
Configuration Tests

Tests for Settings validation and defaults.
"""

import pytest
from pydantic import ValidationError

from books_graphql.config import Settings


class TestSettings:
    """Tests for the Settings model."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch):
        """Test default storage location and port."""
        monkeypatch.setenv("MONGOURI", "mongodb://db:27017")

        settings = Settings(_env_file=None)

        assert settings.mongouri == "mongodb://db:27017"
        assert settings.mongo_database == "graphql"
        assert settings.mongo_collection == "books"
        assert settings.port == 8070
        assert settings.mongo_connect_timeout == 10.0

    def test_mongouri_required(self, monkeypatch: pytest.MonkeyPatch):
        """Test that a missing MONGOURI is fatal."""
        monkeypatch.delenv("MONGOURI", raising=False)

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_mongouri_not_blank(self, monkeypatch: pytest.MonkeyPatch):
        """Test that an empty MONGOURI is rejected."""
        monkeypatch.setenv("MONGOURI", "   ")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_log_level_normalized(self, monkeypatch: pytest.MonkeyPatch):
        """Test that log levels are upper-cased and validated."""
        monkeypatch.setenv("MONGOURI", "mongodb://db:27017")

        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="verbose")

    def test_operation_timeout_positive(self, monkeypatch: pytest.MonkeyPatch):
        """Test that timeouts must be positive."""
        monkeypatch.setenv("MONGOURI", "mongodb://db:27017")

        with pytest.raises(ValidationError):
            Settings(_env_file=None, mongo_operation_timeout=0)

    def test_allowed_origins_list(self, monkeypatch: pytest.MonkeyPatch):
        """Test parsing of the CORS origin list."""
        monkeypatch.setenv("MONGOURI", "mongodb://db:27017")

        settings = Settings(_env_file=None, allowed_origins="http://a, http://b")

        assert settings.allowed_origins_list == ["http://a", "http://b"]

    def test_only_used_settings_declared(self):
        """Test that no deployment-environment switch is declared."""
        assert "environment" not in Settings.model_fields
        assert not hasattr(Settings, "is_production")
