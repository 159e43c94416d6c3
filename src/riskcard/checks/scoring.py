"""Score curves shared by the built-in checks."""

from __future__ import annotations

from riskcard.checks.models import MAX_RESULT_SCORE, MIN_RESULT_SCORE


def decay_score(
    occurrences: int,
    penalty: int = 1,
    maximum: int = MAX_RESULT_SCORE,
    minimum: int = MIN_RESULT_SCORE,
) -> int:
    """Linear decay from *maximum*, one *penalty* per occurrence, floored at *minimum*.

    Example: 0 → 10, 2 → 8, 12 → 0.
    """
    if occurrences < 0:
        raise ValueError(f"negative occurrence count: {occurrences}")
    return max(minimum, maximum - penalty * occurrences)


def proportional_score(success: int, total: int, maximum: int = MAX_RESULT_SCORE) -> int:
    """Share of *success* out of *total*, scaled to *maximum* and truncated."""
    if total <= 0:
        return MIN_RESULT_SCORE
    return min(maximum, max(MIN_RESULT_SCORE, int(maximum * success / total)))
