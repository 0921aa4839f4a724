"""Daily step history, goal and water intake storage."""

import os
import tempfile
import threading
from contextlib import contextmanager
from datetime import date
from pathlib import Path
from typing import Dict, Iterator, Optional, Protocol

import structlog
from pydantic import BaseModel, Field, NonNegativeInt, ValidationError

from stepmaster.config import settings
from stepmaster.exceptions import InvalidGoalError
from stepmaster.progress.models import DailyHistory

logger = structlog.get_logger(__name__)


class HistoryReader(Protocol):
    """Read side consumed by the analytics."""

    def get_history(self) -> DailyHistory:
        ...

    def get_goal(self) -> int:
        ...

    def get_today_steps(self, today: date) -> int:
        ...


class HistoryStore(HistoryReader, Protocol):
    """Read and write side used by the tracker."""

    def save_daily_steps(self, day: date, steps: int) -> None:
        ...

    def save_goal(self, goal: int) -> None:
        ...

    def get_water(self, day: date) -> int:
        ...

    def save_water(self, day: date, count: int) -> int:
        ...

    def writable(self) -> bool:
        ...


class HistoryDocument(BaseModel):
    """Everything the tracker persists."""
    schema_version: str = Field(default="1.0.0")
    history: Dict[str, NonNegativeInt] = Field(default_factory=dict)
    goal: Optional[NonNegativeInt] = None
    water: Dict[str, NonNegativeInt] = Field(default_factory=dict)


class InMemoryHistoryStore:
    """History store kept in process memory.

    Every write goes through ``_persist``. If that raises, the in-memory
    document is restored to its previous state before the error propagates.
    """

    def __init__(self, document: Optional[HistoryDocument] = None):
        self._document = document or HistoryDocument()
        self._lock = threading.RLock()

    def get_history(self) -> DailyHistory:
        """Snapshot of the day -> steps mapping."""
        with self._lock:
            return dict(self._document.history)

    def get_today_steps(self, today: date) -> int:
        with self._lock:
            return self._document.history.get(today.isoformat(), 0)

    def save_daily_steps(self, day: date, steps: int) -> None:
        """Overwrite the running total for ``day``."""
        with self._write():
            self._document.history[day.isoformat()] = max(0, int(steps))

    def get_goal(self) -> int:
        with self._lock:
            if self._document.goal is None:
                return settings.default_daily_goal
            return self._document.goal

    def save_goal(self, goal: int) -> None:
        if goal < settings.min_daily_goal:
            raise InvalidGoalError(goal, settings.min_daily_goal)
        with self._write():
            self._document.goal = int(goal)
        logger.info("Daily goal updated", goal=goal)

    def get_water(self, day: date) -> int:
        with self._lock:
            return self._document.water.get(day.isoformat(), 0)

    def save_water(self, day: date, count: int) -> int:
        """Store the water count for ``day``, never below zero."""
        count = max(0, int(count))
        with self._write():
            self._document.water[day.isoformat()] = count
        return count

    def writable(self) -> bool:
        return True

    @contextmanager
    def _write(self) -> Iterator[None]:
        """Apply a mutation and persist it, or leave the document untouched."""
        with self._lock:
            snapshot = self._document.model_copy(deep=True)
            try:
                yield
                self._persist()
            except Exception:
                self._document = snapshot
                raise

    def _persist(self) -> None:
        """Hook for durable subclasses; called with the lock held."""


class JsonFileHistoryStore(InMemoryHistoryStore):
    """History store backed by a single JSON document on disk."""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path or settings.history_file)
        super().__init__(self._load())

    def _load(self) -> HistoryDocument:
        if not self.path.exists():
            logger.info("No history file yet, starting empty", path=str(self.path))
            return HistoryDocument()

        try:
            document = HistoryDocument.model_validate_json(self.path.read_bytes())
        except (OSError, UnicodeDecodeError, ValidationError) as e:
            logger.warning(
                "Failed to load history, starting empty", path=str(self.path), error=str(e)
            )
            return HistoryDocument()

        logger.info("Loaded history", path=str(self.path), days=len(document.history))
        return document

    def writable(self) -> bool:
        """Whether the history file (or its directory, before first save) can be written."""
        if self.path.exists():
            return os.access(self.path, os.W_OK)
        parent = self.path.parent
        while not parent.exists() and parent != parent.parent:
            parent = parent.parent
        return os.access(parent, os.W_OK)

    def _persist(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(self._document.model_dump_json(indent=2))
            os.replace(tmp_path, self.path)
        except OSError:
            os.unlink(tmp_path)
            raise
