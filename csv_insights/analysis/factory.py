from typing import ClassVar

from csv_insights.analysis.analyzer import Analyzer
from csv_insights.analysis.base import BaseAnalyzer
from csv_insights.analysis.example_client_adapter import ExampleClientAdapter
from csv_insights.analysis.openai_client_adapter import OpenAIClientAdapter
from csv_insights.config.settings import Settings


class AnalyzerFactory:
    """Creates the configured analyzer."""

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
        provider = settings.analysis_provider.lower()
        if provider == "example":
            return Analyzer(client=ExampleClientAdapter(), model="example")
        base_url = cls._resolve_base_url(provider, settings)
        client = OpenAIClientAdapter(
            api_key=str(cls._setting(provider, "api_key", settings) or ""),
            timeout_seconds=int(cls._setting(provider, "timeout_seconds", settings) or 30),
            base_url=base_url,
        )
        return Analyzer(
            client=client,
            model=str(cls._setting(provider, "model_name", settings) or ""),
            temperature=settings.analysis_temperature,
        )

    @classmethod
    def supported_providers(cls) -> list[str]:
        return ["example", "openai", "openai_compatible", *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS)]

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = (settings.analysis_openai_compatible_base_url or "").strip()
            if not url:
                raise ValueError(
                    "analysis_openai_compatible_base_url is required for "
                    "analysis_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        raise ValueError(
            f"Unknown analysis provider '{provider}'. Choose from: {cls.supported_providers()}"
        )

    @staticmethod
    def _setting(provider: str, suffix: str, settings: Settings) -> object:
        return getattr(settings, f"analysis_{provider}_{suffix}")
