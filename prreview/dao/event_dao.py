"""EventDAO — events table operations (append + aggregate reads)."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from prreview.dao.base import BaseDAO
from prreview.models.event import Event


class EventDAO(BaseDAO[Event]):
    model = Event

    async def list_by_type(
        self, session: AsyncSession, event_type: str, limit: int
    ) -> list[Event]:
        """Most recent events of one type."""
        stmt = (
            select(Event)
            .where(Event.event_type == event_type)
            .order_by(Event.created_at.desc(), Event.id.desc())
            .limit(limit)
        )
        result = await session.execute(stmt)
        return list(result.scalars().all())

    async def count_by_type(self, session: AsyncSession) -> dict[str, int]:
        """Row count per event_type; types with no rows are absent."""
        stmt = select(Event.event_type, func.count().label("cnt")).group_by(Event.event_type)
        result = await session.execute(stmt)
        return {row.event_type: row.cnt for row in result}
