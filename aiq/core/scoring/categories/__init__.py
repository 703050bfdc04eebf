"""Category scorers."""

from aiq.core.scoring.categories.clarity import assess_clarity, score_clarity
from aiq.core.scoring.categories.creativity import assess_creativity, score_creativity
from aiq.core.scoring.categories.depth import assess_depth, score_depth
from aiq.core.scoring.categories.efficiency import assess_efficiency, score_efficiency

__all__ = [
    "assess_clarity",
    "assess_creativity",
    "assess_depth",
    "assess_efficiency",
    "score_clarity",
    "score_creativity",
    "score_depth",
    "score_efficiency",
]
