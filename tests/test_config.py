"""Tests for settings."""

from trellis.config import Settings, get_settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("MAX_DEPTH", "MAX_STEPS", "LOG_LEVEL"):
            monkeypatch.delenv(f"TRELLIS_{name}", raising=False)

        settings = Settings()

        assert settings.max_depth == 10
        assert settings.max_steps == 100_000
        assert settings.progress_interval == 100
        assert settings.bench_iterations == 250
        assert settings.log_level == "WARNING"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("TRELLIS_MAX_DEPTH", "4")
        monkeypatch.setenv("TRELLIS_LOG_LEVEL", "DEBUG")

        settings = get_settings()

        assert settings.max_depth == 4
        assert settings.log_level == "DEBUG"
