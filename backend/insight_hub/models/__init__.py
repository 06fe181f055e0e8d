"""Pydantic models for the Insight Hub application."""

from .insight_model import (
    Insight,
    InsightApproach,
    InsightContext,
    InsightLessons,
    InsightOutcome,
    InsightProblem,
    ValidationResult,
)
from .timer_model import Timer

__all__ = [
    "Insight",
    "InsightApproach",
    "InsightContext",
    "InsightLessons",
    "InsightOutcome",
    "InsightProblem",
    "ValidationResult",
    "Timer",
]
