"""Pydantic model representing an engineering insight.

An insight is an abstracted case study: the problem that was faced, the
approach taken, the outcome and the lessons learned. Insights must never
carry source code, credentials or other confidential details.
"""

from __future__ import annotations

import json
import uuid
from datetime import datetime, timezone
from typing import Any, Iterable, List

from pydantic import BaseModel, ConfigDict, Field, model_validator

from insight_hub.core.content_filter import DEFAULT_RULES, ContentRule, first_violation

# Keys where an empty string means "not supplied".
_BLANK_MEANS_MISSING = ("id", "author", "timestamp")


def generate_id() -> str:
    """Return a new opaque insight identifier."""

    return uuid.uuid4().hex


def utc_timestamp() -> str:
    """Return the current UTC time as an ISO-8601 string with milliseconds."""

    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _drop_nulls(data: Any) -> Any:
    if isinstance(data, dict):
        return {key: value for key, value in data.items() if value is not None}
    return data


class _Section(BaseModel):
    """Base for the nested insight sections; nulls fall back to defaults."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _fill_defaults(cls, data: Any) -> Any:
        return _drop_nulls(data)


class InsightContext(_Section):
    domain: str = ""
    scale: str = ""
    timeframe: str = ""


class InsightProblem(_Section):
    description: str = ""
    impact: str = ""
    constraints: List[str] = Field(default_factory=list)


class InsightApproach(_Section):
    alternatives: List[str] = Field(default_factory=list)
    chosen: str = ""
    tradeoffs: List[str] = Field(default_factory=list)
    reasoning: str = ""


class InsightOutcome(_Section):
    results: str = ""
    metrics: List[str] = Field(default_factory=list)
    surprises: str = ""


class InsightLessons(_Section):
    what_worked: List[str] = Field(default_factory=list, alias="whatWorked")
    what_didnt: List[str] = Field(default_factory=list, alias="whatDidnt")
    would_do_differently: List[str] = Field(default_factory=list, alias="wouldDoDifferently")
    key_takeaways: List[str] = Field(default_factory=list, alias="keyTakeaways")


class ValidationResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    is_valid: bool = Field(alias="isValid")
    errors: List[str] = Field(default_factory=list)


class Insight(BaseModel):
    """Represents one shared engineering insight."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(default_factory=generate_id)
    title: str = ""
    author: str = "Anonymous"
    timestamp: str = Field(default_factory=utc_timestamp)
    tags: List[str] = Field(default_factory=list)
    context: InsightContext = Field(default_factory=InsightContext)
    problem: InsightProblem = Field(default_factory=InsightProblem)
    approach: InsightApproach = Field(default_factory=InsightApproach)
    outcome: InsightOutcome = Field(default_factory=InsightOutcome)
    lessons: InsightLessons = Field(default_factory=InsightLessons)

    @model_validator(mode="before")
    @classmethod
    def _fill_defaults(cls, data: Any) -> Any:
        data = _drop_nulls(data)
        if isinstance(data, dict):
            for key in _BLANK_MEANS_MISSING:
                if data.get(key) == "":
                    data.pop(key)
        return data

    def check(self, rules: Iterable[ContentRule] = DEFAULT_RULES) -> ValidationResult:
        """Validate required fields and screen the whole record against ``rules``.

        Field checks are independent of each other. Only the first matching
        content rule is reported.
        """

        errors: List[str] = []

        if not self.title.strip():
            errors.append("Title is required")

        if not self.problem.description.strip():
            errors.append("Problem description is required")

        violation = first_violation(self.serialized(), rules)
        if violation is not None:
            errors.append(violation.message)

        return ValidationResult(is_valid=not errors, errors=errors)

    def to_json(self) -> dict:
        """Return the public, JSON-ready representation of the insight."""

        return self.model_dump(by_alias=True)

    def serialized(self) -> str:
        """Return the record as compact JSON text, used for screening and search."""

        return json.dumps(self.to_json(), ensure_ascii=False, separators=(",", ":"))
