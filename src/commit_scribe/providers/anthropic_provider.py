"""Claude models for commit message drafting.

Install the optional extra (``commit-scribe[anthropic]``) and set
``LLM_PROVIDER=anthropic`` together with ``ANTHROPIC_API_KEY``. Without
``LLM_MODEL`` the factory picks a small Haiku model.
"""

import logging
from typing import TYPE_CHECKING

from commit_scribe.providers.base import BaseLLMProvider, ProviderConfig

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from anthropic import AsyncAnthropic


def _get_anthropic_client(api_key: str | None) -> "AsyncAnthropic":
    """Build the async client, or explain how to install the optional extra.

    Raises:
        ImportError: If the anthropic package is missing.
    """
    try:
        from anthropic import AsyncAnthropic
    except ImportError as e:
        raise ImportError(
            "Anthropic provider requires the 'anthropic' package. "
            "Install with: pip install 'commit-scribe[anthropic]'"
        ) from e
    return AsyncAnthropic(api_key=api_key)


class AnthropicLLMProvider(BaseLLMProvider):
    """Completions from the Anthropic Messages API."""

    def __init__(self, config: ProviderConfig):
        super().__init__(config)
        self._client = _get_anthropic_client(config.api_key)
        logger.info(f"Using Anthropic model {config.model}")

    async def _complete_impl(
        self,
        messages: list[dict[str, str]],
        max_tokens: int,
        temperature: float,
    ) -> str:
        """Send the chat to the Messages API.

        System messages are lifted into the ``system`` parameter; the
        remaining messages keep their order.

        Raises:
            GenerationError: If API call fails.
        """
        system_parts = [msg["content"] for msg in messages if msg["role"] == "system"]
        anthropic_messages = [
            {"role": msg["role"], "content": msg["content"]}
            for msg in messages
            if msg["role"] != "system"
        ]

        kwargs = {}
        if system_parts:
            kwargs["system"] = "\n\n".join(system_parts)

        try:
            response = await self._client.messages.create(
                model=self.config.model,
                max_tokens=max_tokens,
                temperature=temperature,
                messages=anthropic_messages,
                **kwargs,
            )
        except Exception as e:
            logger.error(f"Anthropic completion failed: {e}")
            raise self._upstream_error(e) from e

        text = "".join(
            block.text for block in response.content if getattr(block, "type", "") == "text"
        )
        return text.strip()
