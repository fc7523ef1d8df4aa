"""events table (append-only audit log)."""

from typing import Any, Optional

from sqlalchemy import Enum, Identity, Index, Integer, Text, desc
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from prreview.core.database import Base, CreatedAtMixin
from prreview.events import ALL_EVENT_TYPES

event_type_enum = Enum(*(t.value for t in ALL_EVENT_TYPES), name="event_type")


class Event(CreatedAtMixin, Base):
    __tablename__ = "events"

    id: Mapped[int] = mapped_column(Integer, Identity(always=True), primary_key=True)
    event_type: Mapped[str] = mapped_column(event_type_enum, nullable=False)
    # no FKs: the log outlives the rows it describes
    pr_id: Mapped[str] = mapped_column(Text, nullable=False)
    user_id: Mapped[str] = mapped_column(Text, nullable=False)
    additional_data: Mapped[Optional[dict[str, Any]]] = mapped_column(JSONB)

    __table_args__ = (
        Index("idx_events_type_created", "event_type", desc("created_at")),
        Index("idx_events_pr", "pr_id"),
    )
