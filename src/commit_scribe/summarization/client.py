"""Generation client turning prompts into commit messages."""

import logging

from commit_scribe.chunking.estimator import estimate_tokens
from commit_scribe.config import CommitConfig, get_settings
from commit_scribe.core.errors import TooMuchTokensError
from commit_scribe.core.protocols import Estimator, LLMProvider
from commit_scribe.providers import get_llm_provider
from commit_scribe.summarization.prompts import CommitPrompts

logger = logging.getLogger(__name__)

MESSAGE_TOKEN_OVERHEAD = 4


def count_message_tokens(messages: list[dict[str, str]], estimate: Estimator) -> int:
    """Estimate the input cost of a chat request, including per-message overhead."""
    return sum(estimate(msg["content"]) + MESSAGE_TOKEN_OVERHEAD for msg in messages)


class CommitMessageClient:
    """Generates commit messages and merges partial messages via an LLM provider.

    Upstream failures propagate as raised by the provider; nothing is retried.
    """

    def __init__(
        self,
        llm_provider: LLMProvider | None = None,
        config: CommitConfig | None = None,
        estimate: Estimator | None = None,
        temperature: float | None = None,
    ):
        """Initialize the client.

        Args:
            llm_provider: LLM provider instance. If None, creates from settings.
            config: Configuration snapshot. Defaults to settings.
            estimate: Token estimator for the request size guard.
            temperature: Sampling temperature. Defaults to the provider's.
        """
        self.config = config or get_settings().commit_config()
        self.estimate = estimate or estimate_tokens
        self.temperature = temperature
        self._llm_provider = llm_provider or get_llm_provider(
            max_tokens=self.config.max_output_tokens,
        )

    async def generate(self, messages: list[dict[str, str]]) -> str:
        """Generate a commit message from a full chat prompt.

        Args:
            messages: Chat messages ending with the diff.

        Returns:
            Generated text, possibly empty.

        Raises:
            TooMuchTokensError: If the request cannot fit the input budget.
            GenerationError: If the provider call fails.
        """
        request_tokens = count_message_tokens(messages, self.estimate)
        limit = self.config.max_input_tokens - self.config.max_output_tokens
        if request_tokens > limit:
            raise TooMuchTokensError(
                f"Request needs {request_tokens} tokens but only {limit} are available",
                request_tokens=request_tokens,
                limit=limit,
            )
        return await self._complete(messages)

    async def generate_summary(self, joined: str, config: CommitConfig | None = None) -> str:
        """Merge newline-joined partial commit messages into one message.

        Args:
            joined: Partial messages joined with newlines.
            config: Snapshot whose toggles shape the merge prompt. Defaults
                to the client's own, pass the caller's so the merge follows
                the same options as the partial messages.
        """
        messages = CommitPrompts.get_reduce_messages(config or self.config, joined)
        return await self._complete(messages)

    async def _complete(self, messages: list[dict[str, str]]) -> str:
        logger.debug(f"Requesting completion for {len(messages)} messages")
        return await self._llm_provider.complete(
            messages=messages,
            max_tokens=self.config.max_output_tokens,
            temperature=self.temperature,
        )
