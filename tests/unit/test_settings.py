import pytest
from pydantic import ValidationError

from app.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        assert Settings().app_env == "dev"

    def test_default_docx_engine(self) -> None:
        assert Settings().docx_engine == "python_docx"

    def test_default_analyzer_provider(self) -> None:
        assert Settings().analyzer_provider == "gemini"

    def test_default_analyzer_temperature(self) -> None:
        assert Settings().analyzer_temperature == 0.1

    def test_default_timeouts(self) -> None:
        s = Settings()
        assert s.analyzer_openai_timeout_seconds == 60
        assert s.analyzer_gemini_timeout_seconds == 60


class TestSettingsFromEnv:
    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        assert Settings().log_level == "DEBUG"

    def test_loads_provider(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ANALYZER_PROVIDER", "openai")
        assert Settings().analyzer_provider == "openai"

    def test_loads_api_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ANALYZER_GEMINI_API_KEY", "secret")
        assert Settings().analyzer_gemini_api_key == "secret"

    def test_loads_docx_engine(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DOCX_ENGINE", "ooxml")
        assert Settings().docx_engine == "ooxml"


class TestSettingsValidation:
    def test_invalid_timeout_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ANALYZER_OPENAI_TIMEOUT_SECONDS", "soon")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_temperature_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ANALYZER_TEMPERATURE", "cold")
        with pytest.raises(ValidationError):
            Settings()
