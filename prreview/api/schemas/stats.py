"""Event statistics response schema."""

from __future__ import annotations

from pydantic import BaseModel


class EventStatsResponse(BaseModel):
    event_counts: dict[str, int]
    total_events: int
