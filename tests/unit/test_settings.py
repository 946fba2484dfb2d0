import pytest
from pydantic import ValidationError

from csv_insights.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        assert Settings().app_env == "dev"

    def test_default_read_limits(self) -> None:
        s = Settings()
        assert s.header_read_bytes == 1024
        assert s.excerpt_read_bytes == 4096

    def test_default_export_filename(self) -> None:
        assert Settings().export_filename == "linkedin_profiles.csv"

    def test_default_gemini_model(self) -> None:
        assert Settings().analysis_gemini_model_name == "gemini-2.5-flash"

    def test_default_openai_timeout(self) -> None:
        assert Settings().analysis_openai_timeout_seconds == 30


class TestSettingsFromEnv:
    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        assert Settings().log_level == "DEBUG"

    def test_loads_provider(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ANALYSIS_PROVIDER", "example")
        assert Settings().analysis_provider == "example"

    def test_loads_excerpt_size(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EXCERPT_READ_BYTES", "2048")
        assert Settings().excerpt_read_bytes == 2048


class TestSettingsValidation:
    def test_invalid_excerpt_size_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EXCERPT_READ_BYTES", "lots")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_temperature_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ANALYSIS_TEMPERATURE", "warm")
        with pytest.raises(ValidationError):
            Settings()
