"""Commit message generation with automatic diff decomposition.

A diff that fits the request budget is sent in one call. A larger diff is
decomposed into chunks; every chunk request is dispatched at once, results
are collected in chunk order with a pacing delay between collections, and a
final call merges the partial messages into one.
"""

import asyncio
import dataclasses
import logging

from commit_scribe.chunking.decomposer import ChunkPrompt, DiffContext, DiffDecomposer
from commit_scribe.chunking.estimator import estimate_tokens
from commit_scribe.config import CommitConfig, get_settings
from commit_scribe.core.errors import ConfigurationError, EmptyDiffError, EmptyMessageError
from commit_scribe.core.protocols import Estimator, GenerationClient
from commit_scribe.core.types import GenerationMode
from commit_scribe.summarization.client import CommitMessageClient, count_message_tokens
from commit_scribe.summarization.prompts import CommitPrompts

logger = logging.getLogger(__name__)

ADJUSTMENT_FACTOR = 20


def compute_request_budget(
    max_input_tokens: int,
    prompt_overhead: int,
    max_output_tokens: int,
    safety_margin: int = ADJUSTMENT_FACTOR,
) -> int:
    """Compute the tokens left for diff content in one request.

    Raises:
        ConfigurationError: If nothing is left for the diff.
    """
    budget = max_input_tokens - prompt_overhead - max_output_tokens - safety_margin
    if budget <= 0:
        raise ConfigurationError(
            f"Max output tokens ({max_output_tokens}) leave no room for the diff within "
            f"max input tokens ({max_input_tokens}); prompt overhead is {prompt_overhead}"
        )
    return budget


class CommitMessageGenerator:
    """Drafts one commit message for a diff of any size."""

    def __init__(
        self,
        client: GenerationClient | None = None,
        config: CommitConfig | None = None,
        estimate: Estimator | None = None,
        pacing_delay: float | None = None,
    ):
        """Initialize the generator.

        Args:
            client: Generation client. If None, creates one from settings.
            config: Configuration snapshot, fixed for the generator's lifetime.
            estimate: Token estimator. Defaults to tiktoken.
            pacing_delay: Seconds to wait between collecting chunk results.
        """
        if config is None or pacing_delay is None:
            settings = get_settings()
            config = config or settings.commit_config()
            if pacing_delay is None:
                pacing_delay = settings.pacing_seconds

        self.config = config
        self.estimate = estimate or estimate_tokens
        self.pacing_delay = pacing_delay
        self._client = client or CommitMessageClient(config=config, estimate=self.estimate)
        self._decomposer = DiffDecomposer(self.estimate)
        self.last_mode: GenerationMode | None = None

    def request_budget(self, issue_id: str = "") -> int:
        """Tokens available for diff content next to the fixed prompt.

        Raises:
            ConfigurationError: If the configuration leaves no room for the diff.
        """
        overhead = count_message_tokens(
            CommitPrompts.get_main_messages(self.config, issue_id), self.estimate
        )
        return compute_request_budget(
            self.config.max_input_tokens,
            overhead,
            self.config.max_output_tokens,
        )

    async def generate(self, diff: str, issue_id: str = "") -> str:
        """Generate a commit message for a diff.

        Args:
            diff: Unified diff of the staged changes.
            issue_id: Issue identifier to mention when issues are enabled.

        Returns:
            The final commit message.

        Raises:
            ConfigurationError: If the token budget is not positive.
            EmptyDiffError: If the diff is empty.
            EmptyMessageError: If any generation call returns no text.
            GenerationError: If any generation call fails.
        """
        budget = self.request_budget(issue_id)

        if not diff.strip():
            raise EmptyDiffError("No staged changes to describe")

        if self.estimate(diff) <= budget:
            self.last_mode = GenerationMode.DIRECT
            logger.info("Diff fits one request, generating directly")
            messages = CommitPrompts.get_diff_messages(self.config, diff, issue_id)
            return self._require_message(await self._client.generate(messages), "diff")

        self.last_mode = GenerationMode.CHUNKED
        chunks = self._decomposer.decompose(
            diff,
            budget,
            DiffContext(issue_id=issue_id, language=self.config.language),
        )
        logger.info(f"Diff exceeds {budget} tokens, generating from {len(chunks)} chunks")

        partials = await self._collect_partials(chunks)
        summary = await self._client.generate_summary("\n".join(partials), config=self.config)
        return self._require_message(summary, "merged summary")

    async def _collect_partials(self, chunks: list[ChunkPrompt]) -> list[str]:
        tasks = [asyncio.create_task(self._generate_chunk(chunk)) for chunk in chunks]
        partials: list[str] = []
        try:
            for index, task in enumerate(tasks):
                if index:
                    await asyncio.sleep(self.pacing_delay)
                message = await task
                partials.append(
                    self._require_message(message, f"chunk {index + 1}/{len(tasks)}")
                )
        finally:
            for task in tasks:
                if not task.done():
                    task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
        return partials

    async def _generate_chunk(self, chunk: ChunkPrompt) -> str:
        config = dataclasses.replace(self.config, language=chunk.language)
        messages = CommitPrompts.get_diff_messages(config, chunk.content, chunk.issue_id)
        return await self._client.generate(messages)

    @staticmethod
    def _require_message(message: str | None, stage: str) -> str:
        if not message or not message.strip():
            raise EmptyMessageError(f"Generation returned an empty message for the {stage}")
        return message


async def generate_commit_message(
    diff: str,
    issue_id: str = "",
    client: GenerationClient | None = None,
    config: CommitConfig | None = None,
) -> str:
    """Convenience wrapper around :class:`CommitMessageGenerator`."""
    generator = CommitMessageGenerator(client=client, config=config)
    return await generator.generate(diff, issue_id)
