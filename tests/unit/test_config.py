"""Tests for environment-driven configuration."""

from timeline.config import DEFAULT_SESSION_SECRET, Config


class TestSessionSecret:
    def test_falls_back_to_default_secret(self, monkeypatch):
        """Test that an unset secret uses the built-in default and reports it."""
        monkeypatch.delenv("TIMELINE_SESSION_SECRET", raising=False)
        config = Config(_env_file=None)

        assert config.session_secret == DEFAULT_SESSION_SECRET
        assert config.uses_default_secret

    def test_secret_from_environment(self, monkeypatch):
        monkeypatch.setenv("TIMELINE_SESSION_SECRET", "from-env-secret-value-0123456789abcdef")
        config = Config(_env_file=None)

        assert config.session_secret == "from-env-secret-value-0123456789abcdef"
        assert not config.uses_default_secret


class TestDefaults:
    def test_development_defaults(self, monkeypatch):
        monkeypatch.delenv("TIMELINE_PRODUCTION", raising=False)
        monkeypatch.delenv("TIMELINE_BACKEND_URL", raising=False)
        config = Config(_env_file=None)

        assert config.production is False
        assert config.backend_url == "http://localhost:8080"

    def test_production_flag(self, monkeypatch):
        monkeypatch.setenv("TIMELINE_PRODUCTION", "true")

        assert Config(_env_file=None).production is True
