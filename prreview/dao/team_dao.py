"""TeamDAO — teams table operations (plus member upsert on creation)."""

from typing import Any

from sqlalchemy import func
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from prreview.dao.base import BaseDAO
from prreview.models.team import Team
from prreview.models.user import User


class TeamDAO(BaseDAO[Team]):
    model = Team

    async def create_with_members(
        self,
        session: AsyncSession,
        name: str,
        members: list[dict[str, Any]],
    ) -> Team:
        """Insert the team and upsert each member into it, all or nothing.

        *members* items carry ``id``, ``username`` and ``is_active``.  A
        member that already exists is moved into this team and gets its
        username / active flag overwritten (ON CONFLICT (id) DO UPDATE).
        """
        async with session.begin_nested():
            team = Team(name=name)
            session.add(team)
            await session.flush()

            if members:
                rows = [
                    {
                        "id": m["id"],
                        "username": m["username"],
                        "is_active": m["is_active"],
                        "team_name": name,
                    }
                    for m in members
                ]
                stmt = insert(User).values(rows)
                stmt = stmt.on_conflict_do_update(
                    index_elements=[User.id],
                    set_={
                        "username": stmt.excluded.username,
                        "is_active": stmt.excluded.is_active,
                        "team_name": stmt.excluded.team_name,
                        "updated_at": func.now(),
                    },
                )
                await session.execute(stmt)

        await session.refresh(team)
        return team
