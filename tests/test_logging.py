"""Tests for the structured log formatter."""

import logging

from aiq.core.logging import StructuredFormatter
from aiq.core.scoring import AIQLevel


def make_record(msg: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="aiq.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredFormatter:
    """Tests for StructuredFormatter."""

    def test_levels_render_by_value_and_quoted(self):
        record = make_record(
            "done",
            certificate_code="AIQ-TEST1234",
            extra_data={"aiq_level": AIQLevel.BEGINNER, "score": 54},
        )

        line = StructuredFormatter().format(record)

        assert 'aiq_level="AI Beginner"' in line
        assert "score=54" in line
        assert "certificate_code=AIQ-TEST1234" in line
        assert "message=done" in line

    def test_spaced_message_is_quoted(self):
        line = StructuredFormatter().format(make_record("Session completed: 54%"))
        assert 'message="Session completed: 54%"' in line

    def test_embedded_quotes_are_escaped(self):
        line = StructuredFormatter().format(make_record('say "hi" now'))
        assert 'message="say \\"hi\\" now"' in line
