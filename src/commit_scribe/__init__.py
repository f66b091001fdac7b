"""commit-scribe - token-budgeted commit message drafting."""

__version__ = "0.1.0"

from commit_scribe.config import CommitConfig, Settings, get_settings
from commit_scribe.summarization import CommitMessageGenerator, generate_commit_message

__all__ = [
    "CommitConfig",
    "CommitMessageGenerator",
    "generate_commit_message",
    "get_settings",
    "Settings",
]
