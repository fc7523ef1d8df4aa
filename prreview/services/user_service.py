"""UserService — user lookups and reviewer-eligibility toggling."""

from __future__ import annotations

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from prreview.dao.user_dao import UserDAO
from prreview.models.user import User
from prreview.services import UserNotFoundError

log = structlog.get_logger("prreview.service")


class UserService:
    """Stateless service over the users table."""

    def __init__(self, user_dao: UserDAO) -> None:
        self._user_dao = user_dao

    async def get(self, session: AsyncSession, user_id: str) -> User:
        """Raises :class:`UserNotFoundError` if the user does not exist."""
        user = await self._user_dao.get_by_id(session, user_id)
        if user is None:
            raise UserNotFoundError(f"user '{user_id}' not found")
        return user

    async def get_team_members(self, session: AsyncSession, team_name: str) -> list[User]:
        """All members of a team, inactive ones included."""
        return await self._user_dao.get_by_team(session, team_name)

    async def set_is_active(self, session: AsyncSession, user_id: str, is_active: bool) -> User:
        user = await self._user_dao.set_active(session, user_id, is_active)
        if user is None:
            raise UserNotFoundError(f"user '{user_id}' not found")
        log.info("user.active_changed", user_id=user_id, is_active=is_active)
        return user
