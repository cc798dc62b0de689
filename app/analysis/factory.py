from typing import ClassVar

from app.analysis.analyzer import ContentAnalyzer
from app.analysis.example_client_adapter import ExampleClientAdapter
from app.analysis.openai_client_adapter import OpenAIClientAdapter
from app.analysis.request_builder import AnalysisRequestBuilder
from app.config.settings import Settings


class AnalyzerFactory:
    """Creates the ContentAnalyzer for the configured provider."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> ContentAnalyzer:
        """Create a configured analyzer from application settings."""
        provider = settings.analysis_provider.strip().lower()
        builder = AnalysisRequestBuilder(
            full_text_limit=settings.full_text_limit,
            quick_text_limit=settings.quick_text_limit,
        )
        if provider == "example":
            return ContentAnalyzer(
                client=ExampleClientAdapter(),
                model="example",
                temperature=0.0,
                builder=builder,
            )
        client = OpenAIClientAdapter(
            api_key=cls._resolve_api_key(provider, settings),
            timeout_seconds=settings.analysis_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )
        return ContentAnalyzer(
            client=client,
            model=cls._resolve_model_name(provider, settings),
            temperature=settings.analysis_temperature,
            builder=builder,
        )

    @classmethod
    def supported_providers(cls) -> list[str]:
        return ["example", "openai", "openai_compatible", *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS)]

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.analysis_openai_compatible_base_url.strip()
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

    @classmethod
    def _resolve_api_key(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "openai": settings.analysis_openai_api_key,
            "openai_compatible": settings.analysis_openai_compatible_api_key,
            "openrouter": settings.analysis_openrouter_api_key,
            "groq": settings.analysis_groq_api_key,
            "together": settings.analysis_together_api_key,
            "deepseek": settings.analysis_deepseek_api_key,
            "ollama": settings.analysis_ollama_api_key,
        }
        return key_map.get(provider, "") or ""

    @classmethod
    def _resolve_model_name(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "openai": settings.analysis_openai_model_name,
            "openai_compatible": settings.analysis_openai_compatible_model_name,
            "openrouter": settings.analysis_openrouter_model_name,
            "groq": settings.analysis_groq_model_name,
            "together": settings.analysis_together_model_name,
            "deepseek": settings.analysis_deepseek_model_name,
            "ollama": settings.analysis_ollama_model_name,
        }
        return key_map.get(provider, "") or ""
