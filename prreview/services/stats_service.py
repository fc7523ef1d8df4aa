"""StatsService — event log aggregation."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from prreview.dao.event_dao import EventDAO
from prreview.events import ALL_EVENT_TYPES


class StatsService:
    """Stateless service for event statistics."""

    def __init__(self, event_dao: EventDAO) -> None:
        self._event_dao = event_dao

    async def get_event_stats(self, session: AsyncSession) -> dict:
        """Return ``{"event_counts": {type: n}, "total_events": n}``.

        All known event types are always present (zero when unseen) and the
        total is the sum of the per-type counts.
        """
        raw = await self._event_dao.count_by_type(session)
        counts = {t.value: 0 for t in ALL_EVENT_TYPES}
        counts.update(raw)
        return {
            "event_counts": counts,
            "total_events": sum(counts.values()),
        }
