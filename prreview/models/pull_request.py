"""pull_requests and pr_reviewers tables."""

from datetime import datetime
from typing import Optional

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    Enum,
    ForeignKey,
    Index,
    PrimaryKeyConstraint,
    SmallInteger,
    Text,
    desc,
    text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from prreview.core.database import Base, TimestampMixin
from prreview.engines.reviewer_assignment import MAX_INITIAL_REVIEWERS

PR_STATUS_OPEN = "OPEN"
PR_STATUS_MERGED = "MERGED"

pr_status_enum = Enum(PR_STATUS_OPEN, PR_STATUS_MERGED, name="pr_status")


class PRReviewer(Base):
    __tablename__ = "pr_reviewers"

    pr_id: Mapped[str] = mapped_column(
        Text, ForeignKey("pull_requests.id", ondelete="CASCADE"), nullable=False
    )
    user_id: Mapped[str] = mapped_column(Text, ForeignKey("users.id"), nullable=False)
    # slot in the reviewer list; a reassignment keeps the slot
    position: Mapped[int] = mapped_column(SmallInteger, nullable=False)

    __table_args__ = (
        PrimaryKeyConstraint("pr_id", "user_id", name="pk_pr_reviewers"),
        CheckConstraint(
            f"position >= 0 AND position < {MAX_INITIAL_REVIEWERS}", name="position_range"
        ),
        Index("idx_pr_reviewers_user", "user_id"),
    )


class PullRequest(TimestampMixin, Base):
    __tablename__ = "pull_requests"

    id: Mapped[str] = mapped_column(Text, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    author_id: Mapped[str] = mapped_column(Text, ForeignKey("users.id"), nullable=False)
    status: Mapped[str] = mapped_column(
        pr_status_enum, nullable=False, server_default=text(f"'{PR_STATUS_OPEN}'")
    )
    merged_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))

    reviewers: Mapped[list[PRReviewer]] = relationship(
        order_by=PRReviewer.position,
        lazy="selectin",
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        CheckConstraint(
            f"(status = '{PR_STATUS_MERGED}') = (merged_at IS NOT NULL)",
            name="merged_at_matches_status",
        ),
        Index("idx_pull_requests_author", "author_id"),
        Index("idx_pull_requests_created", desc("created_at")),
    )

    @property
    def assigned_reviewers(self) -> list[str]:
        """Reviewer ids in slot order."""
        return [r.user_id for r in sorted(self.reviewers, key=lambda r: r.position)]

    @property
    def is_merged(self) -> bool:
        return self.status == PR_STATUS_MERGED

    def can_modify_reviewers(self) -> bool:
        return self.status == PR_STATUS_OPEN
