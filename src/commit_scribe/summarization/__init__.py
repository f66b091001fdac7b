"""Commit message generation from diffs of any size."""

from commit_scribe.summarization.client import CommitMessageClient, count_message_tokens
from commit_scribe.summarization.generator import (
    ADJUSTMENT_FACTOR,
    CommitMessageGenerator,
    compute_request_budget,
    generate_commit_message,
)
from commit_scribe.summarization.prompts import IDENTITY, TITLE_MAX_CHARS, CommitPrompts

__all__ = [
    "ADJUSTMENT_FACTOR",
    "CommitMessageClient",
    "CommitMessageGenerator",
    "CommitPrompts",
    "IDENTITY",
    "TITLE_MAX_CHARS",
    "compute_request_budget",
    "count_message_tokens",
    "generate_commit_message",
]
