from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from insight_hub.core.config import Settings
from insight_hub.core.insight_repository import InsightRepository
from insight_hub.core.timer_store import TimerStore
from insight_hub.main import create_app


@pytest.fixture()
def server_settings() -> Settings:
    return Settings(
        ALLOW_ORIGINS=["http://localhost:5173"],
        STATIC_DIR="",
        SEED_SAMPLE_DATA=True,
        LOG_LEVEL="INFO",
        HOST="127.0.0.1",
        PORT=3000,
    )


@pytest.fixture()
def repository() -> InsightRepository:
    repo = InsightRepository()
    repo.seed_sample_data()
    return repo


@pytest.fixture()
def timer_store() -> TimerStore:
    return TimerStore()


@pytest.fixture()
def client(server_settings: Settings, repository: InsightRepository, timer_store: TimerStore):
    app = create_app(server_settings, insight_repository=repository, timer_store=timer_store)
    with TestClient(app) as tc:
        yield tc


def minimal_insight(**overrides) -> dict:
    payload = {
        "title": "Moving batch jobs onto a shared queue",
        "problem": {"description": "Nightly jobs overran their window"},
    }
    payload.update(overrides)
    return payload


@pytest.fixture()
def make_insight():
    return minimal_insight
