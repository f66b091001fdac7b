"""Provider factory for creating LLM providers."""

import logging

from commit_scribe.config import Settings, get_settings
from commit_scribe.core.errors import ConfigurationError
from commit_scribe.core.types import ApiType
from commit_scribe.providers.base import BaseLLMProvider, ProviderConfig

logger = logging.getLogger(__name__)

SUPPORTED_PROVIDERS = ("openai", "azure", "ollama", "anthropic")

DEFAULT_MODELS = {
    "ollama": "llama3.2",
    "anthropic": "claude-3-5-haiku-20241022",
}


def get_llm_provider(
    provider: str | None = None,
    model: str | None = None,
    api_key: str | None = None,
    base_url: str | None = None,
    temperature: float | None = None,
    max_tokens: int | None = None,
    settings: Settings | None = None,
) -> BaseLLMProvider:
    """Get an LLM provider instance based on configuration.

    The provider is determined by (in order of precedence):
    1. Explicit provider parameter
    2. LLM_PROVIDER environment variable (OPENAI_API_TYPE=azure selects Azure)
    3. Default to "openai"

    Args:
        provider: Provider name (openai, azure, ollama, anthropic).
        model: Model identifier.
        api_key: API key (optional for Ollama).
        base_url: Custom base URL.
        temperature: Default temperature.
        max_tokens: Default max output tokens.
        settings: Settings to read defaults from.

    Returns:
        Configured LLM provider instance.

    Raises:
        ConfigurationError: If provider is unknown or misconfigured.
    """
    settings = settings or get_settings()

    provider_name = (provider or _default_provider(settings)).lower()

    config = ProviderConfig(
        provider=provider_name,
        model=model or _get_default_model(provider_name, settings),
        api_key=api_key or _get_api_key(provider_name, settings),
        base_url=base_url or _get_base_url(provider_name, settings),
        temperature=temperature if temperature is not None else settings.llm_temperature,
        max_tokens=max_tokens or settings.generation.tokens_max_output,
        extra=_get_extra(provider_name, settings),
    )

    llm = _create_llm_provider(config)
    if settings.max_concurrent_requests:
        llm.set_concurrency(settings.max_concurrent_requests)
    return llm


def _default_provider(settings: Settings) -> str:
    if settings.ai.llm_provider == "openai" and settings.ai.openai_api_type == ApiType.AZURE:
        return "azure"
    return settings.ai.llm_provider


def _get_default_model(provider_name: str, settings: Settings) -> str:
    if provider_name == "azure" and settings.ai.azure_deployment:
        return settings.ai.azure_deployment
    if provider_name in DEFAULT_MODELS and "llm_model" not in settings.ai.model_fields_set:
        return DEFAULT_MODELS[provider_name]
    return settings.llm_model


def _get_api_key(provider_name: str, settings: Settings) -> str | None:
    if provider_name in ("openai", "azure"):
        key = settings.openai_api_key
        if not key:
            raise ConfigurationError(
                "OPENAI_API_KEY is not set. Set it in the environment or in a .env file."
            )
        return key
    elif provider_name == "anthropic":
        return settings.ai.anthropic_api_key.get_secret_value() or None
    return None


def _get_base_url(provider_name: str, settings: Settings) -> str | None:
    if provider_name == "ollama":
        return settings.ai.ollama_base_url
    if provider_name in ("openai", "azure"):
        return settings.ai.openai_base_url
    return None


def _get_extra(provider_name: str, settings: Settings) -> dict:
    if provider_name == "azure":
        return {
            "deployment": settings.ai.azure_deployment,
            "api_version": settings.ai.azure_api_version,
        }
    return {}


def _create_llm_provider(config: ProviderConfig) -> BaseLLMProvider:
    provider_name = config.provider.lower()

    if provider_name == "openai":
        from commit_scribe.providers.openai_provider import OpenAILLMProvider
        return OpenAILLMProvider(config)

    elif provider_name == "azure":
        if not config.base_url:
            raise ConfigurationError("Azure OpenAI requires OPENAI_BASE_URL to be set")
        from commit_scribe.providers.openai_provider import AzureOpenAILLMProvider
        return AzureOpenAILLMProvider(config)

    elif provider_name == "ollama":
        from commit_scribe.providers.ollama_provider import OllamaLLMProvider
        return OllamaLLMProvider(config)

    elif provider_name == "anthropic":
        from commit_scribe.providers.anthropic_provider import AnthropicLLMProvider
        return AnthropicLLMProvider(config)

    else:
        raise ConfigurationError(
            f"Unknown LLM provider: {provider_name}. "
            f"Supported providers: {', '.join(SUPPORTED_PROVIDERS)}"
        )
