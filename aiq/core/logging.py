"""Structured logging configuration for AIQ Engine."""

import logging
import sys
from enum import Enum
from typing import Any


def _format_value(value: Any) -> str:
    """Render one field; enum members by value, spaced text quoted."""
    if isinstance(value, Enum):
        value = value.value
    text = str(value)
    if any(ch.isspace() for ch in text):
        return '"' + text.replace('"', '\\"') + '"'
    return text


class StructuredFormatter(logging.Formatter):
    """key=value formatter whose values stay single tokens.

    Levels such as "AI Beginner" contain a space, so any value with
    whitespace is quoted.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as structured output."""
        log_data = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "module": record.module,
            "function": record.funcName,
            "message": record.getMessage(),
        }

        if hasattr(record, "certificate_code"):
            log_data["certificate_code"] = record.certificate_code

        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)

        return " ".join(f"{k}={_format_value(v)}" for k, v in log_data.items())


def get_logger(name: str) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)

        # Set level based on environment
        try:
            from aiq.core.config import get_settings

            settings = get_settings()
            if settings.AIQ_ENV == "dev":
                logger.setLevel(logging.DEBUG)
            else:
                logger.setLevel(logging.INFO)
        except Exception:
            # Default to INFO if settings not available
            logger.setLevel(logging.INFO)

    return logger


def log_with_context(logger: logging.Logger, level: int, msg: str, **kwargs: Any) -> None:
    """
    Log with additional context fields.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        msg: Log message
        **kwargs: Additional context fields (e.g., certificate_code)
    """
    extra = {"extra_data": kwargs}
    if "certificate_code" in kwargs:
        extra["certificate_code"] = kwargs.pop("certificate_code")
        extra["extra_data"] = kwargs

    logger.log(level, msg, extra=extra)
