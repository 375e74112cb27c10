"""Tests for application configuration."""

from src.config import Settings


class TestSettings:
    def test_default_settings(self):
        settings = Settings()
        assert settings.app_name == "account-risk-service"
        assert settings.app_version == "0.1.0"
        assert settings.port == 8000
        assert settings.default_assessed_by == "system"

    def test_settings_from_env(self, monkeypatch):
        monkeypatch.setenv("APP_NAME", "test-app")
        monkeypatch.setenv("PORT", "9000")
        monkeypatch.setenv("DEBUG", "true")
        monkeypatch.setenv("LOG_JSON", "false")
        settings = Settings()
        assert settings.app_name == "test-app"
        assert settings.port == 9000
        assert settings.debug is True
        assert settings.log_json is False

    def test_default_assessed_by_override(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_ASSESSED_BY", "batch-runner")
        assert Settings().default_assessed_by == "batch-runner"
