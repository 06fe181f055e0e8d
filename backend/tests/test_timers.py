from __future__ import annotations

import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from insight_hub.core.timer_store import TimerStore, TimerValidationError


def test_store_rejects_short_durations() -> None:
    store = TimerStore()

    with pytest.raises(TimerValidationError):
        store.create("tea", 0)
    with pytest.raises(TimerValidationError):
        store.create("tea", None)
    assert len(store) == 0


def test_store_assigns_sequential_ids_and_default_name() -> None:
    store = TimerStore()
    first = store.create(None, 30)
    second = store.create("Pasta", 600)

    assert (first.id, second.id) == ("1", "2")
    assert first.name == "Unnamed Timer"


def test_store_lists_newest_first() -> None:
    store = TimerStore()
    store.create("older", 10)
    time.sleep(0.01)
    store.create("newer", 10)

    assert [timer.name for timer in store.list()] == ["newer", "older"]


def test_store_update_is_partial() -> None:
    store = TimerStore()
    timer = store.create("Eggs", 300)

    updated = store.update(timer.id, duration=420)

    assert updated.name == "Eggs"
    assert updated.duration == 420
    assert updated.created_at == timer.created_at
    assert updated.updated_at >= timer.updated_at
    assert store.update("missing", name="x") is None
    with pytest.raises(TimerValidationError):
        store.update(timer.id, duration=-5)


def test_timer_api_lifecycle(client) -> None:
    created = client.post("/api/timers", json={"name": "Focus", "duration": 1500})
    assert created.status_code == 201
    timer = created.json()
    assert set(timer) == {"id", "name", "duration", "createdAt", "updatedAt"}

    assert client.get("/api/timers").json()[0]["id"] == timer["id"]

    renamed = client.put(f"/api/timers/{timer['id']}", json={"name": "Deep focus"})
    assert renamed.status_code == 200
    assert renamed.json()["name"] == "Deep focus"
    assert renamed.json()["duration"] == 1500

    deleted = client.delete(f"/api/timers/{timer['id']}")
    assert deleted.json() == {"message": "Timer deleted"}
    assert client.get(f"/api/timers/{timer['id']}").status_code == 404


def test_timer_api_errors(client) -> None:
    invalid = client.post("/api/timers", json={"name": "Nope", "duration": 0})
    missing = client.put("/api/timers/42", json={"name": "x"})

    assert invalid.status_code == 400
    assert invalid.json() == {"detail": "Duration must be at least 1 second"}
    assert missing.status_code == 404
    assert client.delete("/api/timers/42").status_code == 404


def test_concurrent_creates_use_gapless_ids() -> None:
    store = TimerStore()
    with ThreadPoolExecutor(max_workers=8) as pool:
        timers = list(pool.map(lambda i: store.create(f"timer {i}", 60), range(50)))

    assert len(store) == 50
    assert sorted(int(timer.id) for timer in timers) == list(range(1, 51))


def test_timer_type_errors_use_detail_shape(client) -> None:
    response = client.post("/api/timers", json={"name": "Tea", "duration": "soon"})

    assert response.status_code == 400
    assert set(response.json()) == {"detail"}
    assert "duration" in response.json()["detail"]
