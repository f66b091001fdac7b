"""OpenAI and Azure OpenAI provider implementations."""

import logging

from openai import AsyncAzureOpenAI, AsyncOpenAI

from commit_scribe.providers.base import BaseLLMProvider, ProviderConfig

logger = logging.getLogger(__name__)

DEFAULT_AZURE_API_VERSION = "2023-07-01-preview"


class OpenAILLMProvider(BaseLLMProvider):
    """OpenAI LLM provider using GPT models."""

    def __init__(self, config: ProviderConfig):
        """Initialize OpenAI LLM provider.

        Args:
            config: Provider configuration with api_key.
        """
        super().__init__(config)
        self._client = AsyncOpenAI(
            api_key=config.api_key,
            base_url=config.base_url,
        )

    async def _complete_impl(
        self,
        messages: list[dict[str, str]],
        max_tokens: int,
        temperature: float,
    ) -> str:
        """Generate completion using OpenAI API.

        Args:
            messages: Chat messages.
            max_tokens: Maximum tokens.
            temperature: Sampling temperature.

        Returns:
            Generated text, empty if the model returned no content.

        Raises:
            GenerationError: If API call fails.
        """
        try:
            response = await self._client.chat.completions.create(
                model=self.config.model,
                messages=messages,
                temperature=temperature,
                top_p=0.1,
                max_tokens=max_tokens,
            )
        except Exception as e:
            logger.error(f"{self.config.provider} completion failed: {e}")
            raise self._upstream_error(e) from e

        if not response.choices:
            return ""
        content = response.choices[0].message.content
        return content.strip() if content else ""


class AzureOpenAILLMProvider(OpenAILLMProvider):
    """Azure OpenAI provider; ``config.model`` is the deployment name."""

    def __init__(self, config: ProviderConfig):
        BaseLLMProvider.__init__(self, config)
        self._client = AsyncAzureOpenAI(
            api_key=config.api_key,
            azure_endpoint=config.base_url,
            azure_deployment=config.extra.get("deployment") or config.model,
            api_version=config.extra.get("api_version", DEFAULT_AZURE_API_VERSION),
        )
        logger.info(f"Initialized Azure OpenAI provider for deployment {config.model}")
