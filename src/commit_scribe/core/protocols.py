from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from commit_scribe.config.settings import CommitConfig

Estimator = Callable[[str], int]


@runtime_checkable
class LLMProvider(Protocol):
    async def complete(
        self,
        messages: list[dict[str, str]],
        max_tokens: int | None = None,
        temperature: float | None = None,
    ) -> str: ...


@runtime_checkable
class GenerationClient(Protocol):
    async def generate(self, messages: list[dict[str, str]]) -> str: ...
    async def generate_summary(self, joined: str, config: CommitConfig | None = None) -> str: ...
