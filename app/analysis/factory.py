from typing import ClassVar

from app.analysis.analyzer import DocumentAnalyzer
from app.analysis.base import BaseAnalyzer
from app.analysis.example_client_adapter import ExampleClientAdapter
from app.analysis.openai_client_adapter import OpenAIClientAdapter
from app.config.settings import Settings


class AnalyzerFactory:
    """Creates the configured document analyzer."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseAnalyzer:
        """Create a configured analyzer from application settings."""
        provider = settings.analyzer_provider.lower()
        if provider == "example":
            return DocumentAnalyzer(
                client=ExampleClientAdapter(),
                model="example",
                temperature=settings.analyzer_temperature,
            )
        base_url = cls._resolve_base_url(provider, settings)
        client = OpenAIClientAdapter(
            api_key=cls._provider_setting(settings, provider, "api_key", ""),
            timeout_seconds=cls._provider_setting(settings, provider, "timeout_seconds", 60),
            base_url=base_url,
        )
        return DocumentAnalyzer(
            client=client,
            model=cls._provider_setting(settings, provider, "model_name", ""),
            temperature=settings.analyzer_temperature,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.analyzer_openai_compatible_base_url.strip()
            if not url:
                raise ValueError(
                    "analyzer_openai_compatible_base_url is required for "
                    "analyzer_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown analyzer provider '{provider}'. Choose from: {supported}"
        )

    @staticmethod
    def _provider_setting(settings: Settings, provider: str, name: str, default):  # type: ignore[no-untyped-def]
        return getattr(settings, f"analyzer_{provider}_{name}", default) or default
