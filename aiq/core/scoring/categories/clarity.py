"""Clarity category scoring.

Measures whether a response is well formed and states what it is after:
full sentences, a bounded number of questions, precise wording, an explicit
goal and some visible structure.
"""

from aiq.core.scoring.rules import ResponseText, Rule, any_of, apply_rules, flag
from aiq.core.scoring.types import CATEGORY_MAX_SCORES, CategoryScore

SPECIFIC_MARKERS = ("specific", "detailed", "clear", "precise", "exact")

GOAL_MARKERS = ("goal", "objective", "purpose")

STRUCTURE_MARKERS = ("\n", "- ", "1.")

CLARITY_RULES: list[Rule] = [
    # Sentence structure
    flag("sentence_structure", 5, lambda t: "." in t.raw and len(t.raw) > 50),
    flag("questions", 3, lambda t: 0 < t.raw.count("?") <= 3),
    # Specificity
    any_of("specificity", 4, SPECIFIC_MARKERS),
    # Goal definition (case-sensitive)
    any_of("goal_definition", 3, GOAL_MARKERS, case_sensitive=True),
    # Newline, bullet or numbered list
    any_of("structure", 5, STRUCTURE_MARKERS, case_sensitive=True),
]


def assess_clarity(response: str | ResponseText) -> CategoryScore:
    text = ResponseText.from_response(response)
    return apply_rules(CLARITY_RULES, text, CATEGORY_MAX_SCORES["clarity"])


def score_clarity(response: str | ResponseText) -> int:
    """Clarity score in [0, 25]."""
    return assess_clarity(response).score
