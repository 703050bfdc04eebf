"""Efficiency category scoring.

Balances conciseness against completeness by word count, and rewards direct
wording and a fallback plan.
"""

from aiq.core.scoring.rules import ResponseText, Rule, any_of, apply_rules
from aiq.core.scoring.types import CATEGORY_MAX_SCORES, CategoryScore

DIRECT_MARKERS = ("directly", "specifically", "exactly", "precisely")

FALLBACK_MARKERS = ("if not", "alternative", "otherwise")

# (min_words, max_words, bonus); max_words of None means unbounded
WORD_COUNT_BANDS: list[tuple[int, int | None, int]] = [
    (50, 200, 8),
    (201, 400, 5),
    (401, None, 2),
]


def _length_balance(text: ResponseText) -> int:
    words = text.word_count
    for low, high, bonus in WORD_COUNT_BANDS:
        if words >= low and (high is None or words <= high):
            return bonus
    return 0


EFFICIENCY_RULES: list[Rule] = [
    Rule(id="length_balance", award=_length_balance),
    any_of("directness", 4, DIRECT_MARKERS),
    # Error correction consideration (case-sensitive)
    any_of("fallback_plan", 3, FALLBACK_MARKERS, case_sensitive=True),
]


def assess_efficiency(response: str | ResponseText) -> CategoryScore:
    text = ResponseText.from_response(response)
    return apply_rules(EFFICIENCY_RULES, text, CATEGORY_MAX_SCORES["efficiency"])


def score_efficiency(response: str | ResponseText) -> int:
    """Efficiency score in [0, 25]."""
    return assess_efficiency(response).score
