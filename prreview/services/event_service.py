"""EventService — best-effort audit log writes and operator reads."""

from __future__ import annotations

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from prreview.dao.event_dao import EventDAO
from prreview.events import EventPayload, EventType
from prreview.models.event import Event

log = structlog.get_logger("prreview.audit")


class EventService:
    """Stateless service for the append-only event log."""

    def __init__(self, event_dao: EventDAO) -> None:
        self._event_dao = event_dao

    async def record(
        self,
        session: AsyncSession,
        payload: EventPayload,
        *,
        pr_id: str,
        user_id: str,
    ) -> Event | None:
        """Append one event; never raises.

        The insert runs in its own savepoint so a failure leaves the
        caller's transaction (and the state change it already made) intact.
        A failed write is logged and the event is dropped; returns None then.
        """
        event_type = payload.event_type
        try:
            async with session.begin_nested():
                return await self._event_dao.create(
                    session,
                    event_type=event_type.value,
                    pr_id=pr_id,
                    user_id=user_id,
                    additional_data=payload.to_json(),
                )
        except Exception:
            log.exception(
                "audit.record_failed",
                event_type=event_type.value,
                pr_id=pr_id,
                user_id=user_id,
            )
            return None

    async def list_recent(
        self, session: AsyncSession, event_type: EventType, limit: int = 20
    ) -> list[Event]:
        """Newest events of one type."""
        return await self._event_dao.list_by_type(session, event_type.value, limit)
