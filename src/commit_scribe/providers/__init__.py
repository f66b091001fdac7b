"""LLM provider implementations.

Supported providers:
- OpenAI (default)
- Azure OpenAI
- Ollama (local models)
- Anthropic (Claude)

Usage:
    from commit_scribe.providers import get_llm_provider

    llm = get_llm_provider()  # Uses settings to determine provider
    response = await llm.complete(messages=[...])
"""

from commit_scribe.providers.base import BaseLLMProvider, ProviderConfig
from commit_scribe.providers.factory import get_llm_provider

__all__ = [
    "get_llm_provider",
    "BaseLLMProvider",
    "ProviderConfig",
]
