"""Events router — recent audit events of one type."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from prreview.api.deps import get_event_service, get_session
from prreview.api.schemas.event import EventItem, EventListResponse
from prreview.events import EventType
from prreview.services.event_service import EventService

router = APIRouter()


@router.get("", response_model=EventListResponse)
async def list_events(
    event_type: EventType = Query(...),
    limit: int = Query(20, ge=1, le=100),
    session: AsyncSession = Depends(get_session),
    svc: EventService = Depends(get_event_service),
) -> EventListResponse:
    events = await svc.list_recent(session, event_type, limit)
    return EventListResponse(events=[EventItem.model_validate(e) for e in events])
