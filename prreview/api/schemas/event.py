"""Audit event response schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict


class EventItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    event_type: str
    pr_id: str
    user_id: str
    additional_data: dict[str, Any] | None
    created_at: datetime


class EventListResponse(BaseModel):
    events: list[EventItem]
