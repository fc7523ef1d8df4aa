"""Tests for TeamDAO and UserDAO (PostgreSQL)."""

import pytest
from sqlalchemy.exc import IntegrityError

from prreview.dao.team_dao import TeamDAO
from prreview.dao.user_dao import UserDAO


@pytest.fixture
def team_dao():
    return TeamDAO()


@pytest.fixture
def user_dao():
    return UserDAO()


def _member(uid: str, active: bool = True) -> dict:
    return {"id": uid, "username": f"name-{uid}", "is_active": active}


# ── create_with_members ──────────────────────────────────────────────────


class TestCreateWithMembers:
    async def test_creates_team_and_users(self, team_dao, user_dao, session):
        team = await team_dao.create_with_members(
            session, "backend", [_member("u1"), _member("u2", active=False)]
        )

        assert team.name == "backend"
        assert team.created_at is not None
        members = await user_dao.get_by_team(session, "backend")
        assert [(u.id, u.is_active) for u in members] == [("u1", True), ("u2", False)]
        assert all(u.team_name == "backend" for u in members)

    async def test_empty_team(self, team_dao, user_dao, session):
        await team_dao.create_with_members(session, "empty", [])
        assert await team_dao.exists(session, "empty") is True
        assert await user_dao.get_by_team(session, "empty") == []

    async def test_existing_user_moves_to_new_team(self, team_dao, user_dao, session):
        await team_dao.create_with_members(session, "backend", [_member("u1"), _member("u2")])
        await team_dao.create_with_members(
            session, "frontend", [{"id": "u1", "username": "renamed", "is_active": False}]
        )

        user = await user_dao.get_by_id(session, "u1")
        await session.refresh(user)
        assert user.team_name == "frontend"
        assert user.username == "renamed"
        assert user.is_active is False
        assert [u.id for u in await user_dao.get_by_team(session, "backend")] == ["u2"]

    async def test_duplicate_team_name_rejected(self, team_dao, session):
        await team_dao.create_with_members(session, "backend", [])
        session.expunge_all()
        with pytest.raises(IntegrityError):
            await team_dao.create_with_members(session, "backend", [_member("u9")])

    async def test_failed_create_leaves_outer_transaction_usable(
        self, team_dao, user_dao, session
    ):
        await team_dao.create_with_members(session, "backend", [_member("u1")])
        session.expunge_all()
        with pytest.raises(IntegrityError):
            await team_dao.create_with_members(session, "backend", [_member("u9")])

        # savepoint rolled back: nothing from the failed call, earlier rows intact
        assert await user_dao.get_by_id(session, "u9") is None
        assert await team_dao.exists(session, "backend") is True


# ── UserDAO ──────────────────────────────────────────────────────────────


class TestUserDAO:
    async def test_set_active(self, team_dao, user_dao, session):
        await team_dao.create_with_members(session, "backend", [_member("u1")])

        user = await user_dao.set_active(session, "u1", False)

        assert user is not None
        assert user.is_active is False
        assert user.updated_at is not None

    async def test_set_active_unknown(self, user_dao, session):
        assert await user_dao.set_active(session, "ghost", True) is None

    async def test_get_by_team_unknown(self, user_dao, session):
        assert await user_dao.get_by_team(session, "nope") == []

    async def test_update_rejects_pk(self, team_dao, user_dao, session):
        await team_dao.create_with_members(session, "backend", [_member("u1")])
        with pytest.raises(AttributeError, match="immutable"):
            await user_dao.update(session, "u1", id="u2")

    async def test_update_rejects_unknown_column(self, team_dao, user_dao, session):
        await team_dao.create_with_members(session, "backend", [_member("u1")])
        with pytest.raises(AttributeError, match="no column"):
            await user_dao.update(session, "u1", email="x@example.com")

    async def test_empty_pk_rejected(self, user_dao, session):
        with pytest.raises(ValueError):
            await user_dao.get_by_id(session, "")
