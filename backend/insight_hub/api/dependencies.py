from fastapi import Request

from insight_hub.core.insight_repository import InsightRepository
from insight_hub.core.timer_store import TimerStore


def get_insight_repository(request: Request) -> InsightRepository:
    return request.app.state.insight_repository


def get_timer_store(request: Request) -> TimerStore:
    return request.app.state.timer_store
