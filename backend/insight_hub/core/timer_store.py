"""In-memory storage for countdown timers."""

from __future__ import annotations

import logging
import threading
from typing import Dict, List, Optional

from insight_hub.models import Timer
from insight_hub.models.timer_model import now_millis

logger = logging.getLogger(__name__)

DURATION_MESSAGE = "Duration must be at least 1 second"


class TimerValidationError(ValueError):
    """Raised when a timer would be stored with an invalid duration."""


class TimerStore:
    def __init__(self) -> None:
        self._timers: Dict[str, Timer] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._timers)

    def list(self) -> List[Timer]:
        """Return timers newest first; ties keep insertion order."""

        return sorted(self._timers.values(), key=lambda timer: timer.created_at, reverse=True)

    def get(self, timer_id: str) -> Optional[Timer]:
        return self._timers.get(timer_id)

    def create(self, name: Optional[str], duration: Optional[int]) -> Timer:
        if not duration or duration < 1:
            raise TimerValidationError(DURATION_MESSAGE)

        with self._lock:
            timer = Timer(id=str(self._next_id), name=name or "Unnamed Timer", duration=duration)
            self._next_id += 1
            self._timers = {**self._timers, timer.id: timer}

        logger.info(f"Created timer {timer.id} ({timer.duration}s)")
        return timer

    def update(
        self, timer_id: str, name: Optional[str] = None, duration: Optional[int] = None
    ) -> Optional[Timer]:
        if duration is not None and duration < 1:
            raise TimerValidationError(DURATION_MESSAGE)

        with self._lock:
            current = self._timers.get(timer_id)
            if current is None:
                return None

            changes: dict = {"updated_at": max(now_millis(), current.updated_at)}
            if name:
                changes["name"] = name
            if duration:
                changes["duration"] = duration
            timer = current.model_copy(update=changes)
            self._timers = {**self._timers, timer_id: timer}

        logger.info(f"Updated timer {timer_id}")
        return timer

    def delete(self, timer_id: str) -> bool:
        with self._lock:
            if timer_id not in self._timers:
                return False
            self._timers = {key: value for key, value in self._timers.items() if key != timer_id}

        logger.info(f"Deleted timer {timer_id}")
        return True
