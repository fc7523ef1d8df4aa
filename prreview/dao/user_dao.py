"""UserDAO — users table operations."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from prreview.dao.base import BaseDAO
from prreview.models.user import User


class UserDAO(BaseDAO[User]):
    model = User

    async def get_by_team(self, session: AsyncSession, team_name: str) -> list[User]:
        """Every member of *team_name*, inactive ones included."""
        stmt = (
            select(User)
            .where(User.team_name == team_name)
            .order_by(User.id)
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return list(result.scalars().all())

    async def set_active(self, session: AsyncSession, user_id: str, is_active: bool) -> User | None:
        """Flip the reviewer-eligibility flag. Returns None if the user is unknown."""
        return await self.update(session, user_id, is_active=is_active)
