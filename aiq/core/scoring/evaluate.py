"""Per-response evaluation across the four categories."""

from aiq.core.scoring.categories import (
    assess_clarity,
    assess_creativity,
    assess_depth,
    assess_efficiency,
)
from aiq.core.scoring.rules import ResponseText
from aiq.core.scoring.types import CategoryScore, CategoryScoreBreakdown


def explain(response: str, question_number: int) -> dict[str, CategoryScore]:
    """
    Score one response and report which rules fired in each category.

    Args:
        response: Raw response text (may be empty)
        question_number: 1-based position of the question being answered

    Returns:
        Dict of category name -> CategoryScore

    Raises:
        TypeError: If response is not text or question_number is not an int
        ValueError: If question_number < 1
    """
    text = ResponseText.from_response(response)

    return {
        "clarity": assess_clarity(text),
        "depth": assess_depth(text, question_number),
        "efficiency": assess_efficiency(text),
        "creativity": assess_creativity(text),
    }


def evaluate(response: str, question_number: int) -> CategoryScoreBreakdown:
    """
    Score one response into a category breakdown.

    Pure function: the same input always yields the same breakdown.

    Args:
        response: Raw response text (may be empty)
        question_number: 1-based position of the question being answered

    Returns:
        CategoryScoreBreakdown with each category in [0, 25]
    """
    categories = explain(response, question_number)
    return CategoryScoreBreakdown(**{name: c.score for name, c in categories.items()})
