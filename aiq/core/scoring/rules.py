"""Declarative scoring rules shared by the category scorers.

A category is a base score plus a table of rules. Each rule looks at the
response and awards a bonus (possibly zero). Rules are independent: every
rule in the table is evaluated and the bonuses are added, then the total is
clamped to the category maximum.

All substring checks are literal, with no word boundaries, so a marker inside
a longer word still counts.
"""

from dataclasses import dataclass
from typing import Callable

from aiq.core.scoring.types import BASE_SCORE, CategoryScore


@dataclass(frozen=True)
class ResponseText:
    """A response prepared once for all rules (lowercased a single time)."""

    raw: str
    lowered: str

    @classmethod
    def from_response(cls, response: "str | ResponseText") -> "ResponseText":
        if isinstance(response, ResponseText):
            return response
        if not isinstance(response, str):
            raise TypeError(
                f"response must be text, got {type(response).__name__}"
            )
        return cls(raw=response, lowered=response.lower())

    @property
    def word_count(self) -> int:
        return len(self.raw.split())


@dataclass(frozen=True)
class Rule:
    """One scoring rule."""

    id: str
    award: Callable[[ResponseText], int]


# =============================================================================
# Rule builders
# =============================================================================


def flag(id: str, bonus: int, check: Callable[[ResponseText], bool]) -> Rule:
    """Rule that awards a fixed bonus when check(text) holds."""
    return Rule(id=id, award=lambda text: bonus if check(text) else 0)


def any_of(id: str, bonus: int, markers: tuple[str, ...], case_sensitive: bool = False) -> Rule:
    """Rule that awards its bonus once if any marker is present."""

    def check(text: ResponseText) -> bool:
        haystack = text.raw if case_sensitive else text.lowered
        return any(marker in haystack for marker in markers)

    return flag(id, bonus, check)


def tally(id: str, per_marker: int, max_bonus: int, markers: tuple[str, ...]) -> Rule:
    """Rule that awards per distinct marker found (case-insensitive), capped."""

    def award(text: ResponseText) -> int:
        found = sum(1 for marker in markers if marker in text.lowered)
        return min(found * per_marker, max_bonus)

    return Rule(id=id, award=award)


# =============================================================================
# Evaluation
# =============================================================================


def apply_rules(rules: list[Rule], text: ResponseText, max_score: int) -> CategoryScore:
    """
    Score one category.

    Args:
        rules: The category's rule table
        text: Prepared response
        max_score: Category cap

    Returns:
        CategoryScore clamped to [0, max_score], with the ids of rules that fired
    """
    score = BASE_SCORE
    signals: list[str] = []

    for rule in rules:
        bonus = rule.award(text)
        if bonus:
            score += bonus
            signals.append(rule.id)

    return CategoryScore(score=max(0, min(score, max_score)), signals=signals)
