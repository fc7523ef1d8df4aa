"""SQLAlchemy ORM models — one file per table."""

from prreview.models.event import Event
from prreview.models.pull_request import PRReviewer, PullRequest
from prreview.models.team import Team
from prreview.models.user import User

__all__ = [
    "Event",
    "PRReviewer",
    "PullRequest",
    "Team",
    "User",
]
