"""Core abstractions shared across commit-scribe."""

from commit_scribe.core.errors import (
    CommitScribeError,
    ConfigurationError,
    EmptyDiffError,
    EmptyMessageError,
    GenerationError,
    GitError,
    TooMuchTokensError,
    UnauthorizedError,
)
from commit_scribe.core.protocols import (
    Estimator,
    GenerationClient,
    LLMProvider,
)
from commit_scribe.core.types import (
    ApiType,
    GenerationMode,
    PromptModule,
    Role,
)

__all__ = [
    "ApiType",
    "CommitScribeError",
    "ConfigurationError",
    "EmptyDiffError",
    "EmptyMessageError",
    "Estimator",
    "GenerationClient",
    "GenerationError",
    "GenerationMode",
    "GitError",
    "LLMProvider",
    "PromptModule",
    "Role",
    "TooMuchTokensError",
    "UnauthorizedError",
]
