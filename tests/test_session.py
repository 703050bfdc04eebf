"""Tests for assessment session state and aggregation."""

import random
import re
from datetime import datetime, timezone

import pytest

from aiq.core.scoring import AIQLevel, CategoryScoreBreakdown
from aiq.core.session import (
    AssessmentSession,
    average_breakdown,
    build_result,
    complete_session,
)

STRUCTURED_PLAN = (
    "First, I will analyze the specific goal.\n"
    "- Then I will evaluate alternatives directly."
)
CREATIVE_PITCH = (
    "This novel idea is like a bridge between business and technical teams, "
    "a different approach."
)

FIXED_NOW = datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)


class TestSessionNavigation:
    """Tests for the questionnaire cursor."""

    def test_defaults_to_configured_question_count(self):
        session = AssessmentSession()
        assert session.total_questions == 5
        assert session.current_question == 1
        assert session.is_first_question

    def test_next_and_previous(self):
        session = AssessmentSession(total_questions=3)

        assert session.previous_question() is False
        assert session.next_question() is True
        assert session.next_question() is True
        assert session.is_last_question
        assert session.next_question() is False
        assert session.current_question == 3

        assert session.previous_question() is True
        assert session.current_question == 2

    def test_progress_percent(self):
        session = AssessmentSession(total_questions=4)
        assert session.progress_percent == 25
        session.next_question()
        assert session.progress_percent == 50

    def test_record_and_replace_response(self):
        session = AssessmentSession(total_questions=2)
        session.record_response(1, "draft")
        session.record_response(1, "final")

        assert session.current_response == "final"
        assert session.responses == {1: "final"}

    def test_record_out_of_range_raises(self):
        session = AssessmentSession(total_questions=2)
        with pytest.raises(ValueError):
            session.record_response(3, "text")
        with pytest.raises(ValueError):
            session.record_response(0, "text")

    def test_check_question_number(self):
        session = AssessmentSession(total_questions=5)
        session.check_question_number(5)
        with pytest.raises(ValueError):
            session.check_question_number(9)
        with pytest.raises(ValueError):
            session.check_question_number(-3)

    def test_record_non_text_raises(self):
        session = AssessmentSession(total_questions=2)
        with pytest.raises(TypeError):
            session.record_response(1, 42)

    def test_invalid_construction(self):
        with pytest.raises(ValueError):
            AssessmentSession(total_questions=0)
        with pytest.raises(ValueError):
            AssessmentSession(total_questions=3, current_question=4)


class TestAverageBreakdown:
    """Tests for average_breakdown()."""

    def test_skips_blank_and_missing_responses(self):
        breakdown, answered = average_breakdown(
            {1: STRUCTURED_PLAN, 2: CREATIVE_PITCH, 3: "   ", 4: None, 5: ""}
        )

        # (22+10)/2, (15+5)/2, (12+5)/2 -> 8.5 rounds up, (5+23)/2
        assert breakdown == CategoryScoreBreakdown(
            clarity=16, depth=10, efficiency=9, creativity=14
        )
        assert answered == 2

    def test_single_response_is_its_own_breakdown(self):
        breakdown, answered = average_breakdown({1: STRUCTURED_PLAN})
        assert breakdown == CategoryScoreBreakdown(
            clarity=22, depth=15, efficiency=12, creativity=5
        )
        assert answered == 1

    def test_no_answers_gives_zeros(self):
        breakdown, answered = average_breakdown({1: "", 2: None})
        assert breakdown == CategoryScoreBreakdown(
            clarity=0, depth=0, efficiency=0, creativity=0
        )
        assert answered == 0

    def test_non_text_response_raises(self):
        with pytest.raises(TypeError):
            average_breakdown({1: 3.14})


class TestBuildResult:
    """Tests for build_result()."""

    def test_scores_and_levels(self):
        result = build_result(
            {1: STRUCTURED_PLAN, 2: CREATIVE_PITCH},
            certificate_code="AIQ-ABCD1234",
            timestamp=FIXED_NOW,
        )

        assert result.score == 49
        assert result.level == AIQLevel.BEGINNER
        assert result.certificate_code == "AIQ-ABCD1234"
        assert result.timestamp == FIXED_NOW
        assert result.answered_questions == 2

    def test_empty_session_is_novice_zero(self):
        result = build_result({}, certificate_code="AIQ-ABCD1234", timestamp=FIXED_NOW)

        assert result.score == 0
        assert result.level == AIQLevel.NOVICE
        assert result.answered_questions == 0


class TestCompleteSession:
    """Tests for complete_session()."""

    def test_stores_result(self, store):
        session = AssessmentSession(total_questions=5)
        session.record_response(1, STRUCTURED_PLAN)

        result = complete_session(session, store, rng=random.Random(7), now=FIXED_NOW)

        assert store.get() == result
        assert result.score == 54
        assert re.fullmatch(r"AIQ-[A-Z0-9]{8}", result.certificate_code)

    def test_replaces_previous_result(self, store):
        first = AssessmentSession(total_questions=5)
        first.record_response(1, STRUCTURED_PLAN)
        complete_session(first, store, now=FIXED_NOW)

        second = AssessmentSession(total_questions=5)
        latest = complete_session(second, store, now=FIXED_NOW)

        assert store.get() == latest
        assert store.get().score == 0

    def test_defaults_timestamp_to_now(self, store):
        result = complete_session(AssessmentSession(), store)
        assert result.timestamp.tzinfo is not None
