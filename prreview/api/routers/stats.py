"""Stats router — audit event counts."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from prreview.api.deps import get_session, get_stats_service
from prreview.api.schemas.stats import EventStatsResponse
from prreview.services.stats_service import StatsService

router = APIRouter()


@router.get("", response_model=EventStatsResponse)
async def get_stats(
    session: AsyncSession = Depends(get_session),
    svc: StatsService = Depends(get_stats_service),
) -> EventStatsResponse:
    result = await svc.get_event_stats(session)
    return EventStatsResponse(**result)
