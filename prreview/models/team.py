"""teams table."""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from prreview.core.database import Base, TimestampMixin


class Team(TimestampMixin, Base):
    __tablename__ = "teams"

    # The team name is the primary key; membership lives on users.team_name.
    name: Mapped[str] = mapped_column(Text, primary_key=True)
