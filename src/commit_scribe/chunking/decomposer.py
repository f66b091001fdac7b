"""Token-budgeted decomposition of unified diffs.

A diff that does not fit one request is split file by file, then hunk by
hunk, then line by line, recombining small neighbours at every level. The
``segment`` of every returned chunk is a contiguous slice of the input, so
joining the segments in order gives back the original diff.
"""

import logging
import re
from dataclasses import dataclass

from commit_scribe.chunking.estimator import estimate_tokens
from commit_scribe.chunking.merger import pack_segments
from commit_scribe.core.errors import ConfigurationError
from commit_scribe.core.protocols import Estimator

logger = logging.getLogger(__name__)

FILE_MARKER = "diff --git "
HUNK_MARKER = "@@ "

_FILE_BOUNDARY = re.compile(r"^(?=diff --git )", re.MULTILINE)
_HUNK_BOUNDARY = re.compile(r"^(?=@@ )", re.MULTILINE)
_LINE_BOUNDARY = re.compile(r"(?<=\n)")


@dataclass(frozen=True)
class DiffContext:
    issue_id: str = ""
    language: str = "en"


@dataclass(frozen=True)
class ChunkPrompt:
    """A budget-sized piece of a diff that can be summarised on its own.

    Attributes:
        segment: Raw slice of the source diff.
        context: Repeated ``diff --git`` line for pieces cut from the middle
            of a file, empty when the segment starts at a file boundary.
        issue_id: Issue identifier to mention in the message.
        language: Locale of the generated message.
    """
    segment: str
    context: str = ""
    issue_id: str = ""
    language: str = "en"

    @property
    def content(self) -> str:
        return self.context + self.segment


def split_file_sections(diff: str) -> list[str]:
    """Split a diff at every line starting with ``diff --git ``."""
    return [part for part in _FILE_BOUNDARY.split(diff) if part]


def split_hunks(section: str) -> tuple[str, list[str]]:
    """Separate a file section into its header and its ``@@`` hunks."""
    header, *hunks = _HUNK_BOUNDARY.split(section)
    return header, [hunk for hunk in hunks if hunk]


def split_lines(text: str) -> list[str]:
    return [line for line in _LINE_BOUNDARY.split(text) if line]


def _file_line(section: str) -> str:
    if not section.startswith(FILE_MARKER):
        return ""
    return split_lines(section)[0]


class DiffDecomposer:
    """Splits an oversized diff into ordered chunks within a token budget."""

    def __init__(self, estimate: Estimator | None = None):
        self.estimate = estimate or estimate_tokens

    def decompose(
        self,
        diff: str,
        budget: int,
        context: DiffContext | None = None,
    ) -> list[ChunkPrompt]:
        """Split a diff into chunk prompts.

        Args:
            diff: Unified diff text.
            budget: Maximum estimated tokens per chunk.
            context: Issue and locale attached to every chunk.

        Returns:
            Chunks in diff order. An empty diff yields a single empty chunk.

        Raises:
            ConfigurationError: If the budget is not positive.
        """
        if budget <= 0:
            raise ConfigurationError(
                f"Token budget for diff chunks is {budget}; the output token "
                "reservation leaves no room for input. Lower the max output "
                "tokens or raise the max input tokens."
            )
        context = context or DiffContext()

        pieces: list[tuple[str, str]] = []
        if not diff:
            pieces.append(("", ""))

        for group in pack_segments(split_file_sections(diff), budget, self.estimate):
            if self.estimate(group) <= budget:
                pieces.append(("", group))
            else:
                pieces.extend(self._split_file(group, budget))

        logger.debug(f"Decomposed diff into {len(pieces)} chunks (budget {budget})")
        return [
            ChunkPrompt(
                segment=segment,
                context=piece_context,
                issue_id=context.issue_id,
                language=context.language,
            )
            for piece_context, segment in pieces
        ]

    def _split_file(self, section: str, budget: int) -> list[tuple[str, str]]:
        header, hunks = split_hunks(section)
        file_line = _file_line(section)
        limit = budget - self.estimate(file_line)
        if limit <= 0:
            file_line, limit = "", budget

        segments = [header + hunks[0], *hunks[1:]] if hunks else [header]

        pieces: list[tuple[str, str]] = []
        for index, group in enumerate(pack_segments(segments, limit, self.estimate)):
            lead = "" if index == 0 else file_line
            if self.estimate(lead + group) <= budget:
                pieces.append((lead, group))
            else:
                lines = self._split_lines(group, limit)
                pieces.append((lead, lines[0]))
                pieces.extend((file_line, piece) for piece in lines[1:])
        return pieces

    def _split_lines(self, text: str, limit: int) -> list[str]:
        chunks: list[str] = []
        buffer = ""

        for line in split_lines(text):
            if self.estimate(line) > limit:
                logger.warning(
                    f"Line of {len(line)} characters exceeds the token budget of {limit}, "
                    "slicing it"
                )
                # the pending lines lead the first slice so no chunk is header-only
                rest, buffer = buffer + line, ""
                while self.estimate(rest) > limit:
                    cut = self._fit_prefix(rest, limit)
                    chunks.append(rest[:cut])
                    rest = rest[cut:]
                line = rest

            if buffer and self.estimate(buffer) + self.estimate(line) > limit:
                chunks.append(buffer)
                buffer = line
            else:
                buffer += line

        if buffer:
            chunks.append(buffer)

        return chunks

    def _fit_prefix(self, text: str, limit: int) -> int:
        """Length of the longest prefix, up to ``limit`` characters, that fits ``limit``.

        Starts from ``limit`` characters and binary-searches downwards, so a
        piece of multi-token characters is shortened until it fits. Always
        returns at least one character.
        """
        high = min(len(text), limit)
        if self.estimate(text[:high]) <= limit:
            return high

        low = 1
        while low < high:
            mid = (low + high + 1) // 2
            if self.estimate(text[:mid]) <= limit:
                low = mid
            else:
                high = mid - 1
        return low
