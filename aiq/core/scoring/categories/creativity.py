"""Creativity category scoring."""

from aiq.core.scoring.rules import ResponseText, Rule, any_of, apply_rules, tally
from aiq.core.scoring.types import CATEGORY_MAX_SCORES, CategoryScore

NOVELTY_MARKERS = ("innovative", "creative", "novel", "unique", "original")

UNCONVENTIONAL_MARKERS = (
    "unconventional",
    "different approach",
    "new way",
    "alternative method",
)

DOMAIN_MARKERS = ("business", "technical", "creative", "analytical", "strategic")

ANALOGY_MARKERS = ("like", "similar to", "analogous")

CREATIVITY_RULES: list[Rule] = [
    any_of("novelty", 5, NOVELTY_MARKERS),
    any_of("unconventional", 5, UNCONVENTIONAL_MARKERS),
    tally("multidisciplinary", per_marker=2, max_bonus=6, markers=DOMAIN_MARKERS),
    # Metaphor and analogy (case-sensitive)
    any_of("analogy", 4, ANALOGY_MARKERS, case_sensitive=True),
]


def assess_creativity(response: str | ResponseText) -> CategoryScore:
    text = ResponseText.from_response(response)
    return apply_rules(CREATIVITY_RULES, text, CATEGORY_MAX_SCORES["creativity"])


def score_creativity(response: str | ResponseText) -> int:
    """Creativity score in [0, 25]."""
    return assess_creativity(response).score
