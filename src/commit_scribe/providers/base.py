"""Base classes for LLM providers."""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from commit_scribe.core.errors import GenerationError, UnauthorizedError

logger = logging.getLogger(__name__)

HTTP_UNAUTHORIZED = 401


@dataclass
class ProviderConfig:
    """Configuration for an LLM provider.

    Attributes:
        provider: Provider name (openai, azure, ollama, anthropic).
        model: Model identifier (deployment name for Azure).
        api_key: API key (optional for local providers like Ollama).
        base_url: Custom base URL (Ollama endpoint, Azure resource, proxy).
        temperature: Default temperature for completions.
        max_tokens: Default max output tokens for completions.
        extra: Additional provider-specific configuration.
    """
    provider: str
    model: str
    api_key: str | None = None
    base_url: str | None = None
    temperature: float = 0.0
    max_tokens: int = 500
    extra: dict = field(default_factory=dict)


class BaseLLMProvider(ABC):
    """Abstract base class for LLM providers.

    Requests are dispatched without a concurrency cap unless
    :meth:`set_concurrency` installs one. Failed calls are never retried.
    """

    def __init__(self, config: ProviderConfig):
        """Initialize the provider.

        Args:
            config: Provider configuration.
        """
        self.config = config
        self._semaphore: asyncio.Semaphore | None = None

    @abstractmethod
    async def _complete_impl(
        self,
        messages: list[dict[str, str]],
        max_tokens: int,
        temperature: float,
    ) -> str:
        """Implementation-specific completion logic.

        Args:
            messages: Chat messages.
            max_tokens: Maximum tokens to generate.
            temperature: Sampling temperature.

        Returns:
            Generated text.
        """
        ...

    async def complete(
        self,
        messages: list[dict[str, str]],
        max_tokens: int | None = None,
        temperature: float | None = None,
    ) -> str:
        """Generate a completion from messages.

        Args:
            messages: Chat messages with 'role' and 'content' keys.
            max_tokens: Maximum tokens to generate.
            temperature: Sampling temperature.

        Returns:
            Generated completion text.

        Raises:
            GenerationError: If the upstream call fails.
            UnauthorizedError: If the upstream service rejects the credentials.
        """
        max_tokens = max_tokens or self.config.max_tokens
        temperature = temperature if temperature is not None else self.config.temperature

        if self._semaphore is None:
            return await self._complete_impl(messages, max_tokens, temperature)
        async with self._semaphore:
            return await self._complete_impl(messages, max_tokens, temperature)

    def set_concurrency(self, max_concurrent: int) -> None:
        """Cap the number of requests in flight.

        Args:
            max_concurrent: Maximum concurrent API calls.
        """
        self._semaphore = asyncio.Semaphore(max_concurrent)

    def _upstream_error(self, error: Exception) -> GenerationError:
        name = self.config.provider
        if getattr(error, "status_code", None) == HTTP_UNAUTHORIZED:
            return UnauthorizedError(
                f"{name} rejected the API key, check the configured credentials",
                provider=name,
                cause=error,
            )
        return GenerationError(f"{name} completion failed: {error}", provider=name, cause=error)
