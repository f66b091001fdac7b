"""Token estimation and diff decomposition."""

from commit_scribe.chunking.decomposer import (
    FILE_MARKER,
    HUNK_MARKER,
    ChunkPrompt,
    DiffContext,
    DiffDecomposer,
    split_file_sections,
    split_hunks,
)
from commit_scribe.chunking.estimator import (
    TokenEstimator,
    estimate_tokens,
    get_estimator,
)
from commit_scribe.chunking.merger import pack_segments

__all__ = [
    "ChunkPrompt",
    "DiffContext",
    "DiffDecomposer",
    "FILE_MARKER",
    "HUNK_MARKER",
    "TokenEstimator",
    "estimate_tokens",
    "get_estimator",
    "pack_segments",
    "split_file_sections",
    "split_hunks",
]
