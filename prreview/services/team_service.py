"""TeamService — team creation (member onboarding) and lookup."""

from __future__ import annotations

from dataclasses import dataclass

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from prreview.dao.team_dao import TeamDAO
from prreview.dao.user_dao import UserDAO
from prreview.services import TeamExistsError, TeamNotFoundError

log = structlog.get_logger("prreview.service")


@dataclass
class TeamMemberInput:
    """One member listed in a create-team request."""

    user_id: str
    username: str
    is_active: bool = True


class TeamService:
    """Stateless service for teams.

    Teams are the unit of onboarding: creating one upserts every listed
    member as a user of that team.
    """

    def __init__(self, team_dao: TeamDAO, user_dao: UserDAO) -> None:
        self._team_dao = team_dao
        self._user_dao = user_dao

    async def team_exists(self, session: AsyncSession, name: str) -> bool:
        return await self._team_dao.exists(session, name)

    async def create_team(
        self,
        session: AsyncSession,
        name: str,
        members: list[TeamMemberInput],
    ) -> dict:
        """Create *name* with *members*.

        Raises :class:`TeamExistsError` if the name is taken.  Duplicate
        user ids in *members* collapse to the last occurrence.
        """
        if await self.team_exists(session, name):
            raise TeamExistsError(f"team '{name}' already exists")

        by_id = {m.user_id: m for m in members}
        team = await self._team_dao.create_with_members(
            session,
            name,
            [
                {"id": m.user_id, "username": m.username, "is_active": m.is_active}
                for m in by_id.values()
            ],
        )
        log.info("team.created", team_name=name, members=len(by_id))
        return await self._with_members(session, team)

    async def get_team(self, session: AsyncSession, name: str) -> dict:
        """Return ``{"team": Team, "members": [User, ...]}``.

        Raises :class:`TeamNotFoundError` if the team does not exist.
        """
        team = await self._team_dao.get_by_id(session, name)
        if team is None:
            raise TeamNotFoundError(f"team '{name}' not found")
        return await self._with_members(session, team)

    async def _with_members(self, session: AsyncSession, team) -> dict:
        members = await self._user_dao.get_by_team(session, team.name)
        return {"team": team, "members": members}
