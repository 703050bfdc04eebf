"""Single-slot storage for the most recent assessment result.

Exactly one result exists at a time; put() replaces it wholesale. Writes are
serialized with a lock so concurrent completions cannot interleave.
"""

import json
import os
import threading
from functools import lru_cache
from pathlib import Path
from typing import Protocol

from pydantic import ValidationError

from aiq.core.config import get_settings
from aiq.core.logging import get_logger
from aiq.core.scoring.types import CompositeResult

logger = get_logger(__name__)


class ResultStore(Protocol):
    """Storage interface for the single most recent result."""

    def put(self, result: CompositeResult) -> None: ...

    def get(self) -> CompositeResult | None: ...

    def clear(self) -> None: ...


class InMemoryResultStore:
    """Result store backed by process memory."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._result: CompositeResult | None = None

    def put(self, result: CompositeResult) -> None:
        with self._lock:
            self._result = result

    def get(self) -> CompositeResult | None:
        return self._result

    def clear(self) -> None:
        with self._lock:
            self._result = None


class JsonFileResultStore:
    """Result store backed by a single JSON file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()

    def put(self, result: CompositeResult) -> None:
        """Write the result, replacing any previous one atomically."""
        payload = result.model_dump(mode="json", by_alias=True)

        with self._lock:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
            tmp_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
            os.replace(tmp_path, self.path)

        logger.debug(f"Stored result in {self.path}")

    def get(self) -> CompositeResult | None:
        """
        Read the stored result.

        Returns:
            The stored result, or None if nothing usable is stored
        """
        if not self.path.exists():
            return None

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            return CompositeResult.model_validate(data)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
            logger.warning(f"Ignoring unreadable result file {self.path}: {e}")
            return None

    def clear(self) -> None:
        with self._lock:
            self.path.unlink(missing_ok=True)


@lru_cache(maxsize=1)
def get_result_store() -> ResultStore:
    """
    Get the configured result store (cached singleton).

    Returns:
        InMemoryResultStore or JsonFileResultStore, per RESULT_STORE_BACKEND
    """
    settings = get_settings()
    if settings.RESULT_STORE_BACKEND == "file":
        logger.info(f"Using file result store at {settings.RESULT_STORE_PATH}")
        return JsonFileResultStore(settings.RESULT_STORE_PATH)

    return InMemoryResultStore()
