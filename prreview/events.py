"""Audit event kinds and their payloads.

Each event kind has exactly one payload model; the ``kind`` field is the
discriminator.  Payloads are built by the lifecycle services and only turned
into JSON at the store boundary (:meth:`EventService.record`), the rest of
the code never looks inside them.
"""

from __future__ import annotations

import enum
from datetime import datetime
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class EventType(str, enum.Enum):
    PR_CREATED = "pr_created"
    PR_MERGED = "pr_merged"
    REVIEWER_ASSIGNED = "reviewer_assigned"
    REVIEWER_REASSIGNED = "reviewer_reassigned"
    # No flow emits this yet (there is no "remove reviewer" operation).
    REVIEWER_UNASSIGNED = "reviewer_unassigned"


ALL_EVENT_TYPES: tuple[EventType, ...] = tuple(EventType)


class _Payload(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: str

    @property
    def event_type(self) -> EventType:
        return EventType(self.kind)

    def to_json(self) -> dict:
        """Serialize for the ``additional_data`` column (discriminator dropped)."""
        return self.model_dump(mode="json", exclude={"kind"})


class PRCreatedPayload(_Payload):
    kind: Literal["pr_created"] = "pr_created"
    pr_name: str
    created_at: datetime


class PRMergedPayload(_Payload):
    kind: Literal["pr_merged"] = "pr_merged"
    merged_at: datetime


class ReviewerAssignedPayload(_Payload):
    kind: Literal["reviewer_assigned"] = "reviewer_assigned"
    assigned_at: datetime


class ReviewerReassignedPayload(_Payload):
    kind: Literal["reviewer_reassigned"] = "reviewer_reassigned"
    old_user_id: str
    new_user_id: str
    reassigned_at: datetime


class ReviewerUnassignedPayload(_Payload):
    kind: Literal["reviewer_unassigned"] = "reviewer_unassigned"
    unassigned_at: datetime


EventPayload = Annotated[
    Union[
        PRCreatedPayload,
        PRMergedPayload,
        ReviewerAssignedPayload,
        ReviewerReassignedPayload,
        ReviewerUnassignedPayload,
    ],
    Field(discriminator="kind"),
]
