from typing import ClassVar

from medfiling.config.settings import Settings
from medfiling.extraction.base import BaseFieldExtractor
from medfiling.extraction.extractor import FieldExtractor
from medfiling.extraction.openai_client_adapter import OpenAIClientAdapter
from medfiling.logging.logger import Log


class FieldExtractorFactory:
    """Creates the configured field extractor."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseFieldExtractor:
        """Create a field extractor from application settings.

        An empty API key yields an extractor in fallback mode.
        """
        provider = settings.extraction_provider.lower()
        base_url = cls._resolve_base_url(provider, settings)
        api_key = cls._resolve_api_key(provider, settings)
        if not api_key:
            Log.warning(f"No API key configured for extraction provider '{provider}'")
            return FieldExtractor(client=None)
        client = OpenAIClientAdapter(
            api_key=api_key,
            timeout_seconds=cls._resolve_timeout_seconds(provider, settings),
            base_url=base_url,
        )
        return FieldExtractor(
            client=client,
            model=cls._resolve_model_name(provider, settings),
            temperature=cls._resolve_temperature(provider, settings),
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.extraction_openai_compatible_base_url.strip()
            if not url:
                raise ValueError(
                    "extraction_openai_compatible_base_url is required for "
                    "extraction_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        supported = ["openai", "openai_compatible", *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS)]
        raise ValueError(
            f"Unknown extraction provider '{provider}'. Choose from: {supported}"
        )

    @classmethod
    def _resolve_api_key(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "gemini": settings.extraction_gemini_api_key,
            "openai": settings.extraction_openai_api_key,
            "openai_compatible": settings.extraction_openai_compatible_api_key,
            "openrouter": settings.extraction_openrouter_api_key,
            "groq": settings.extraction_groq_api_key,
            "together": settings.extraction_together_api_key,
            "deepseek": settings.extraction_deepseek_api_key,
            # a local server accepts any key
            "ollama": settings.extraction_ollama_api_key or "ollama",
        }
        return key_map.get(provider, "").strip()

    @classmethod
    def _resolve_model_name(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "gemini": settings.extraction_gemini_model_name,
            "openai": settings.extraction_openai_model_name,
            "openai_compatible": settings.extraction_openai_compatible_model_name,
            "openrouter": settings.extraction_openrouter_model_name,
            "groq": settings.extraction_groq_model_name,
            "together": settings.extraction_together_model_name,
            "deepseek": settings.extraction_deepseek_model_name,
            "ollama": settings.extraction_ollama_model_name,
        }
        return key_map.get(provider, "") or ""

    @classmethod
    def _resolve_timeout_seconds(cls, provider: str, settings: Settings) -> int:
        key_map = {
            "gemini": settings.extraction_gemini_timeout_seconds,
            "openai": settings.extraction_openai_timeout_seconds,
            "openai_compatible": settings.extraction_openai_compatible_timeout_seconds,
            "openrouter": settings.extraction_openrouter_timeout_seconds,
            "groq": settings.extraction_groq_timeout_seconds,
            "together": settings.extraction_together_timeout_seconds,
            "deepseek": settings.extraction_deepseek_timeout_seconds,
            "ollama": settings.extraction_ollama_timeout_seconds,
        }
        return key_map.get(provider, 30) or 30

    @classmethod
    def _resolve_temperature(cls, provider: str, settings: Settings) -> float:
        if provider == "openai":
            return settings.extraction_openai_temperature
        return 0.0
