"""Depth category scoring.

Rewards responses that ask for higher-order work (analysis, synthesis,
comparison), lay the work out in steps and supply context.
"""

from aiq.core.scoring.rules import ResponseText, Rule, any_of, apply_rules, flag, tally
from aiq.core.scoring.types import CATEGORY_MAX_SCORES, CategoryScore

ADVANCED_MARKERS = ("analyze", "synthesize", "compare", "evaluate", "strategize")

STEP_MARKERS = ("first", "then", "next", "finally", "step")

CONTEXT_MARKERS = ("context", "background")

LONG_FORM_CHARS = 200

DEPTH_RULES: list[Rule] = [
    tally("advanced_capabilities", per_marker=3, max_bonus=9, markers=ADVANCED_MARKERS),
    tally("multi_step_reasoning", per_marker=2, max_bonus=6, markers=STEP_MARKERS),
    flag("long_form", 3, lambda t: len(t.raw) > LONG_FORM_CHARS),
    any_of("context_awareness", 2, CONTEXT_MARKERS),
]


def _check_question_number(question_number: int) -> None:
    if isinstance(question_number, bool) or not isinstance(question_number, int):
        raise TypeError(
            f"question_number must be an int, got {type(question_number).__name__}"
        )
    if question_number < 1:
        raise ValueError(f"question_number must be >= 1, got {question_number}")


def assess_depth(response: str | ResponseText, question_number: int) -> CategoryScore:
    text = ResponseText.from_response(response)
    _check_question_number(question_number)
    # question_number is accepted but does not change the rules
    return apply_rules(DEPTH_RULES, text, CATEGORY_MAX_SCORES["depth"])


def score_depth(response: str | ResponseText, question_number: int) -> int:
    """Depth score in [0, 25]."""
    return assess_depth(response, question_number).score
