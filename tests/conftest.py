"""Pytest configuration and fixtures."""

import os
from datetime import datetime, timezone

import pytest

from aiq.core.scoring.types import AIQLevel, CategoryScoreBreakdown, CompositeResult
from aiq.db.result_store import InMemoryResultStore


@pytest.fixture(scope="session", autouse=True)
def setup_test_env():
    """Set up test environment variables."""
    os.environ["AIQ_ENV"] = "test"
    os.environ["RESULT_STORE_BACKEND"] = "memory"
    os.environ["TOTAL_QUESTIONS"] = "5"


@pytest.fixture
def store():
    """Empty in-memory result store."""
    return InMemoryResultStore()


@pytest.fixture
def stored_result():
    """A completed result with a known certificate code."""
    return CompositeResult(
        score=54,
        level=AIQLevel.BEGINNER,
        breakdown=CategoryScoreBreakdown(clarity=22, depth=15, efficiency=12, creativity=5),
        certificate_code="AIQ-TEST1234",
        timestamp=datetime(2026, 1, 15, 12, 30, tzinfo=timezone.utc),
        answered_questions=1,
    )
