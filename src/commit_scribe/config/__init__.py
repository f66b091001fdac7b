"""Configuration module for commit-scribe."""

from commit_scribe.config.settings import (
    AISettings,
    CommitConfig,
    GenerationSettings,
    Settings,
    get_settings,
)

__all__ = [
    "AISettings",
    "CommitConfig",
    "GenerationSettings",
    "Settings",
    "get_settings",
]
