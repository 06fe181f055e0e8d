"""Pydantic model for countdown timers."""

from __future__ import annotations

import time

from pydantic import BaseModel, ConfigDict, Field


def now_millis() -> int:
    return int(time.time() * 1000)


class Timer(BaseModel):
    """A named countdown, ``duration`` in seconds."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str = "Unnamed Timer"
    duration: int
    created_at: int = Field(default_factory=now_millis, alias="createdAt")
    updated_at: int = Field(default_factory=now_millis, alias="updatedAt")

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True)
