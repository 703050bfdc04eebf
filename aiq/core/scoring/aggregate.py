"""Composite score and level computation.

The four categories are capped at 25 each, so their sum already sits on a
0-100 scale. The composite is that sum as a percentage, rounded half-up and
capped at 100, then mapped onto the level ladder.
"""

import math
from collections.abc import Mapping

from aiq.core.scoring.types import (
    LEVEL_THRESHOLDS,
    MAX_COMPOSITE_SCORE,
    AIQLevel,
    CategoryScoreBreakdown,
    CompositeScore,
)


def round_half_up(value: float) -> int:
    """Round to the nearest int, .5 going up (Python's round() goes to even)."""
    return math.floor(value + 0.5)


def calculate_composite(breakdown: CategoryScoreBreakdown) -> int:
    """
    Turn a breakdown into a 0-100 composite score.

    Args:
        breakdown: Category scores (each 0-25)

    Returns:
        Composite score, at most 100
    """
    total = breakdown.total()
    percentage = (total / MAX_COMPOSITE_SCORE) * 100
    return min(round_half_up(percentage), MAX_COMPOSITE_SCORE)


def get_level(score: int) -> AIQLevel:
    """Map a composite score to its level (first threshold met wins)."""
    for threshold, level in LEVEL_THRESHOLDS:
        if score >= threshold:
            return level
    return AIQLevel.NOVICE


def aggregate(breakdown: CategoryScoreBreakdown | Mapping[str, int]) -> CompositeScore:
    """
    Compute the composite score and level for a breakdown.

    Args:
        breakdown: CategoryScoreBreakdown, or a mapping with the four
            category keys (validated into one)

    Returns:
        CompositeScore with score and level

    Raises:
        ValidationError: If a mapping is missing a category or holds an
            out-of-range value
    """
    if not isinstance(breakdown, CategoryScoreBreakdown):
        breakdown = CategoryScoreBreakdown.model_validate(dict(breakdown))

    score = calculate_composite(breakdown)
    return CompositeScore(score=score, level=get_level(score))
