"""In-memory repository of insights with CRUD, search and tag lookup."""

from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError

from insight_hub.core.content_filter import DEFAULT_RULES, ContentRule
from insight_hub.core.sample_data import SAMPLE_INSIGHT
from insight_hub.models import Insight

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Insight not found"


class ErrorKind(str, Enum):
    not_found = "not_found"
    validation = "validation"


class RepositoryResult(BaseModel):
    """Outcome of a mutating repository call."""

    success: bool
    insight: Optional[Dict[str, Any]] = None
    errors: List[str] = Field(default_factory=list)
    error_kind: Optional[ErrorKind] = None

    @classmethod
    def ok(cls, insight: Optional[Insight] = None) -> "RepositoryResult":
        return cls(success=True, insight=insight.to_json() if insight is not None else None)

    @classmethod
    def failed(cls, kind: ErrorKind, errors: List[str]) -> "RepositoryResult":
        return cls(success=False, errors=errors, error_kind=kind)

    @classmethod
    def not_found(cls) -> "RepositoryResult":
        return cls.failed(ErrorKind.not_found, [NOT_FOUND_MESSAGE])


def format_errors(errors: Iterable[dict]) -> List[str]:
    """Flatten pydantic error dicts into ``"field.path: reason"`` messages."""

    messages: List[str] = []
    for error in errors:
        location = ".".join(str(part) for part in error["loc"] if part != "body") or "insight"
        messages.append(f"{location}: {error['msg']}")
    return messages


class InsightRepository:
    """Process-local store of :class:`Insight` records.

    Mutations are serialized with a lock and publish a new list, so readers
    always iterate a snapshot that is never modified in place.
    """

    def __init__(self, rules: Optional[Iterable[ContentRule]] = None) -> None:
        self.rules: tuple[ContentRule, ...] = tuple(DEFAULT_RULES if rules is None else rules)
        self._insights: List[Insight] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._insights)

    def seed_sample_data(self) -> RepositoryResult:
        result = self.create(SAMPLE_INSIGHT)
        if result.success:
            logger.info(f"Seeded sample insight {result.insight['id']}")
        return result

    # ---------- queries ----------

    def get_all(self) -> List[dict]:
        return [insight.to_json() for insight in self._insights]

    def get_by_id(self, insight_id: str) -> Optional[dict]:
        for insight in self._insights:
            if insight.id == insight_id:
                return insight.to_json()
        return None

    def search(self, query: str) -> List[dict]:
        """Case-insensitive substring match against each serialized record."""

        needle = query.lower()
        return [
            insight.to_json()
            for insight in self._insights
            if needle in insight.serialized().lower()
        ]

    def get_by_tag(self, tag: str) -> List[dict]:
        return [insight.to_json() for insight in self._insights if tag in insight.tags]

    # ---------- mutations ----------

    def _build(self, data: Dict[str, Any]) -> tuple[Optional[Insight], List[str]]:
        try:
            insight = Insight.model_validate(data)
        except ValidationError as exc:
            return None, format_errors(exc.errors())

        validation = insight.check(self.rules)
        if not validation.is_valid:
            return None, validation.errors
        return insight, []

    def create(self, data: Dict[str, Any]) -> RepositoryResult:
        insight, errors = self._build(data)
        if insight is None:
            logger.warning(f"Rejected new insight: {errors}")
            return RepositoryResult.failed(ErrorKind.validation, errors)

        with self._lock:
            if any(existing.id == insight.id for existing in self._insights):
                return RepositoryResult.failed(
                    ErrorKind.validation, [f"Insight id '{insight.id}' already exists"]
                )
            self._insights = [*self._insights, insight]

        logger.info(f"Created insight {insight.id}")
        return RepositoryResult.ok(insight)

    def update(self, insight_id: str, data: Dict[str, Any]) -> RepositoryResult:
        with self._lock:
            index = self._index_of(insight_id)
            if index is None:
                return RepositoryResult.not_found()

            if not isinstance(data, Mapping):
                return RepositoryResult.failed(
                    ErrorKind.validation, ["insight: Input should be a valid dictionary"]
                )

            merged = dict(data)
            merged["id"] = insight_id
            merged["timestamp"] = self._insights[index].timestamp

            insight, errors = self._build(merged)
            if insight is None:
                logger.warning(f"Rejected update to insight {insight_id}: {errors}")
                return RepositoryResult.failed(ErrorKind.validation, errors)

            updated = list(self._insights)
            updated[index] = insight
            self._insights = updated

        logger.info(f"Updated insight {insight_id}")
        return RepositoryResult.ok(insight)

    def delete(self, insight_id: str) -> RepositoryResult:
        with self._lock:
            index = self._index_of(insight_id)
            if index is None:
                return RepositoryResult.not_found()
            self._insights = self._insights[:index] + self._insights[index + 1:]

        logger.info(f"Deleted insight {insight_id}")
        return RepositoryResult.ok()

    def _index_of(self, insight_id: str) -> Optional[int]:
        for index, insight in enumerate(self._insights):
            if insight.id == insight_id:
                return index
        return None
