from collections.abc import Iterable

from commit_scribe.core.protocols import Estimator


def pack_segments(
    segments: Iterable[str],
    budget: int,
    estimate: Estimator,
) -> list[str]:
    """Greedily merge consecutive segments into groups that fit the budget.

    Segments are never reordered. A segment that exceeds the budget on its
    own is emitted as a group by itself so the caller can split it further.

    Args:
        segments: Ordered text segments.
        budget: Maximum estimated tokens per group.
        estimate: Token estimator.

    Returns:
        Ordered groups, each the concatenation of one or more inputs.
    """
    groups: list[str] = []
    current = ""

    for segment in segments:
        if current and estimate(current + segment) > budget:
            groups.append(current)
            current = segment
        else:
            current += segment

    if current:
        groups.append(current)

    return groups
