"""Assessment session state and aggregation.

A session collects one response per question, lets the caller move back and
forth between questions, and on completion averages the per-response
breakdowns into a single stored result.

Session state is an explicit object passed to whoever drives the
questionnaire; nothing here is module-level.
"""

import logging
import random
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone

from aiq.core.certificates import generate_certificate_code
from aiq.core.config import get_settings
from aiq.core.logging import get_logger, log_with_context
from aiq.core.scoring import aggregate, evaluate
from aiq.core.scoring.aggregate import round_half_up
from aiq.core.scoring.types import CATEGORIES, CategoryScoreBreakdown, CompositeResult
from aiq.db.result_store import ResultStore

logger = get_logger(__name__)


def _default_total_questions() -> int:
    return get_settings().TOTAL_QUESTIONS


@dataclass
class AssessmentSession:
    """Questionnaire state: the cursor and the responses captured so far."""

    total_questions: int = field(default_factory=_default_total_questions)
    current_question: int = 1
    responses: dict[int, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.total_questions < 1:
            raise ValueError("total_questions must be >= 1")
        self.check_question_number(self.current_question)

    def check_question_number(self, question_number: int) -> None:
        """Raise ValueError unless 1 <= question_number <= total_questions."""
        if not 1 <= question_number <= self.total_questions:
            raise ValueError(
                f"question_number must be between 1 and {self.total_questions}, "
                f"got {question_number}"
            )

    def record_response(self, question_number: int, text: str) -> None:
        """Capture (or replace) the response for a question."""
        if not isinstance(text, str):
            raise TypeError(f"response must be text, got {type(text).__name__}")
        self.check_question_number(question_number)
        self.responses[question_number] = text

    @property
    def current_response(self) -> str | None:
        return self.responses.get(self.current_question)

    @property
    def is_first_question(self) -> bool:
        return self.current_question == 1

    @property
    def is_last_question(self) -> bool:
        return self.current_question == self.total_questions

    @property
    def progress_percent(self) -> float:
        return (self.current_question / self.total_questions) * 100

    def next_question(self) -> bool:
        """Advance the cursor. Returns False on the last question (time to submit)."""
        if self.is_last_question:
            return False
        self.current_question += 1
        return True

    def previous_question(self) -> bool:
        """Move the cursor back. Returns False on the first question."""
        if self.is_first_question:
            return False
        self.current_question -= 1
        return True


# =============================================================================
# Aggregation
# =============================================================================


def average_breakdown(
    responses: Mapping[int, str | None],
) -> tuple[CategoryScoreBreakdown, int]:
    """
    Average the category scores of all answered responses.

    Missing and whitespace-only responses are skipped and do not count toward
    the divisor. With no answered responses the breakdown is all zeros.

    Args:
        responses: Dict of question_number -> response text (or None)

    Returns:
        Tuple of (averaged breakdown, number of answered responses)

    Raises:
        TypeError: If a response is neither text nor None
    """
    totals = dict.fromkeys(CATEGORIES, 0)
    answered = 0

    for question_number, response in sorted(responses.items()):
        if response is None or (isinstance(response, str) and not response.strip()):
            continue

        breakdown = evaluate(response, question_number)
        for category in CATEGORIES:
            totals[category] += getattr(breakdown, category)
        answered += 1

    if answered == 0:
        return CategoryScoreBreakdown(**totals), 0

    averaged = {category: round_half_up(total / answered) for category, total in totals.items()}
    return CategoryScoreBreakdown(**averaged), answered


def build_result(
    responses: Mapping[int, str | None],
    *,
    certificate_code: str,
    timestamp: datetime,
) -> CompositeResult:
    """
    Build the final result for a set of responses.

    Args:
        responses: Dict of question_number -> response text (or None)
        certificate_code: Code to attach to the result
        timestamp: Completion time

    Returns:
        CompositeResult (score 0 / AI Novice if nothing was answered)
    """
    breakdown, answered = average_breakdown(responses)
    composite = aggregate(breakdown)

    return CompositeResult(
        score=composite.score,
        level=composite.level,
        breakdown=breakdown,
        certificate_code=certificate_code,
        timestamp=timestamp,
        answered_questions=answered,
    )


def complete_session(
    session: AssessmentSession,
    store: ResultStore,
    *,
    rng: random.Random | None = None,
    now: datetime | None = None,
) -> CompositeResult:
    """
    Finish a session: score it, issue a certificate code and store the result.

    The stored result replaces whatever was there before.

    Args:
        session: Session holding the captured responses
        store: Result store to write to
        rng: Random source for the certificate code
        now: Completion time (defaults to the current UTC time)

    Returns:
        The stored CompositeResult
    """
    result = build_result(
        session.responses,
        certificate_code=generate_certificate_code(rng),
        timestamp=now or datetime.now(timezone.utc),
    )

    if result.answered_questions == 0:
        logger.warning("Session completed with no answered questions")

    store.put(result)

    log_with_context(
        logger,
        logging.INFO,
        f"Session completed: {result.score}% ({result.level.value})",
        certificate_code=result.certificate_code,
        score=result.score,
        aiq_level=result.level,
        answered_questions=result.answered_questions,
    )
    return result
