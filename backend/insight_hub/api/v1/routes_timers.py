"""CRUD endpoints for countdown timers."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from insight_hub.api.dependencies import get_timer_store
from insight_hub.core.timer_store import TimerStore, TimerValidationError

router = APIRouter(prefix="/timers", tags=["timers"])


class TimerRequest(BaseModel):
    name: Optional[str] = None
    duration: Optional[int] = None


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Timer not found")


@router.get("")
def list_timers(store: TimerStore = Depends(get_timer_store)) -> List[Dict[str, Any]]:
    """Return all timers, newest first."""

    return [timer.to_json() for timer in store.list()]


@router.get("/{timer_id}")
def get_timer(timer_id: str, store: TimerStore = Depends(get_timer_store)) -> Dict[str, Any]:
    timer = store.get(timer_id)
    if timer is None:
        raise _not_found()
    return timer.to_json()


@router.post("", status_code=status.HTTP_201_CREATED)
def create_timer(request: TimerRequest, store: TimerStore = Depends(get_timer_store)) -> Dict[str, Any]:
    try:
        timer = store.create(request.name, request.duration)
    except TimerValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return timer.to_json()


@router.put("/{timer_id}")
def update_timer(
    timer_id: str, request: TimerRequest, store: TimerStore = Depends(get_timer_store)
) -> Dict[str, Any]:
    try:
        timer = store.update(timer_id, name=request.name, duration=request.duration)
    except TimerValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    if timer is None:
        raise _not_found()
    return timer.to_json()


@router.delete("/{timer_id}")
def delete_timer(timer_id: str, store: TimerStore = Depends(get_timer_store)) -> Dict[str, str]:
    if not store.delete(timer_id):
        raise _not_found()
    return {"message": "Timer deleted"}
