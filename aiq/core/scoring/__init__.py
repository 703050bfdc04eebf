"""AIQ scoring system.

Scores free-text responses across 4 categories, each 0-25:
- Clarity: well-formed, specific, goal-oriented
- Depth: higher-order, multi-step, contextual
- Efficiency: balanced length, direct, has a fallback
- Creativity: novel, unconventional, cross-domain, analogical

Usage:
    from aiq.core.scoring import aggregate, evaluate

    breakdown = evaluate("First, analyze the goal.", 1)
    result = aggregate(breakdown)
    print(f"{result.level.value} ({result.score}%)")
"""

from aiq.core.scoring.aggregate import aggregate, calculate_composite, get_level
from aiq.core.scoring.evaluate import evaluate, explain
from aiq.core.scoring.types import (
    BASE_SCORE,
    CATEGORIES,
    CATEGORY_MAX_SCORES,
    LEVEL_THRESHOLDS,
    AIQLevel,
    CategoryScore,
    CategoryScoreBreakdown,
    CompositeResult,
    CompositeScore,
    VerificationResult,
    VerificationStatus,
)

__all__ = [
    "evaluate",
    "explain",
    "aggregate",
    "calculate_composite",
    "get_level",
    "AIQLevel",
    "CategoryScore",
    "CategoryScoreBreakdown",
    "CompositeResult",
    "CompositeScore",
    "VerificationResult",
    "VerificationStatus",
    "BASE_SCORE",
    "CATEGORIES",
    "CATEGORY_MAX_SCORES",
    "LEVEL_THRESHOLDS",
]
