"""Tests for TeamService."""

from unittest.mock import AsyncMock

import pytest

from prreview.dao.team_dao import TeamDAO
from prreview.dao.user_dao import UserDAO
from prreview.models.team import Team
from prreview.models.user import User
from prreview.services import TeamExistsError, TeamNotFoundError
from prreview.services.team_service import TeamMemberInput, TeamService

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_service() -> tuple[TeamService, TeamDAO, UserDAO]:
    team_dao = TeamDAO()
    user_dao = UserDAO()
    return TeamService(team_dao, user_dao), team_dao, user_dao


def _members(*ids: str) -> list[User]:
    return [User(id=uid, username=uid.upper(), team_name="backend", is_active=True) for uid in ids]


# ---------------------------------------------------------------------------
# create_team
# ---------------------------------------------------------------------------


class TestCreateTeam:
    async def test_create_team(self):
        service, team_dao, user_dao = _make_service()
        team = Team(name="backend")
        team_dao.exists = AsyncMock(return_value=False)
        team_dao.create_with_members = AsyncMock(return_value=team)
        user_dao.get_by_team = AsyncMock(return_value=_members("u1", "u2"))

        session = AsyncMock()
        result = await service.create_team(
            session,
            "backend",
            [TeamMemberInput("u1", "Alice"), TeamMemberInput("u2", "Bob", is_active=False)],
        )

        assert result["team"] is team
        assert [u.id for u in result["members"]] == ["u1", "u2"]
        team_dao.create_with_members.assert_awaited_once_with(
            session,
            "backend",
            [
                {"id": "u1", "username": "Alice", "is_active": True},
                {"id": "u2", "username": "Bob", "is_active": False},
            ],
        )
        user_dao.get_by_team.assert_awaited_once_with(session, "backend")

    async def test_create_team_duplicate_name(self):
        service, team_dao, _ = _make_service()
        team_dao.exists = AsyncMock(return_value=True)
        team_dao.create_with_members = AsyncMock()

        with pytest.raises(TeamExistsError, match="backend"):
            await service.create_team(AsyncMock(), "backend", [TeamMemberInput("u1", "Alice")])
        team_dao.create_with_members.assert_not_awaited()

    async def test_duplicate_member_ids_last_wins(self):
        service, team_dao, user_dao = _make_service()
        team_dao.exists = AsyncMock(return_value=False)
        team_dao.create_with_members = AsyncMock(return_value=Team(name="backend"))
        user_dao.get_by_team = AsyncMock(return_value=_members("u1"))

        await service.create_team(
            AsyncMock(),
            "backend",
            [TeamMemberInput("u1", "Alice"), TeamMemberInput("u1", "Alicia", is_active=False)],
        )

        rows = team_dao.create_with_members.await_args.args[2]
        assert rows == [{"id": "u1", "username": "Alicia", "is_active": False}]

    async def test_create_empty_team(self):
        service, team_dao, user_dao = _make_service()
        team_dao.exists = AsyncMock(return_value=False)
        team_dao.create_with_members = AsyncMock(return_value=Team(name="empty"))
        user_dao.get_by_team = AsyncMock(return_value=[])

        result = await service.create_team(AsyncMock(), "empty", [])
        assert result["members"] == []

    async def test_team_exists_error_is_400(self):
        assert TeamExistsError.status_code == 400
        assert TeamExistsError.code == "TEAM_EXISTS"


# ---------------------------------------------------------------------------
# get_team
# ---------------------------------------------------------------------------


class TestGetTeam:
    async def test_get_team(self):
        service, team_dao, user_dao = _make_service()
        team = Team(name="backend")
        team_dao.get_by_id = AsyncMock(return_value=team)
        user_dao.get_by_team = AsyncMock(return_value=_members("u1", "u2", "u3"))

        result = await service.get_team(AsyncMock(), "backend")

        assert result["team"] is team
        assert len(result["members"]) == 3

    async def test_get_team_not_found(self):
        service, team_dao, _ = _make_service()
        team_dao.get_by_id = AsyncMock(return_value=None)

        with pytest.raises(TeamNotFoundError, match="ghost"):
            await service.get_team(AsyncMock(), "ghost")

    async def test_team_exists(self):
        service, team_dao, _ = _make_service()
        team_dao.exists = AsyncMock(return_value=True)

        session = AsyncMock()
        assert await service.team_exists(session, "backend") is True
        team_dao.exists.assert_awaited_once_with(session, "backend")
