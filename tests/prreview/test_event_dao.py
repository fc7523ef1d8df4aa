"""Tests for EventDAO (PostgreSQL)."""

import pytest

from prreview.dao.event_dao import EventDAO


@pytest.fixture
def dao():
    return EventDAO()


async def _add(dao, session, event_type, pr_id="pr-1", user_id="u1", data=None):
    return await dao.create(
        session, event_type=event_type, pr_id=pr_id, user_id=user_id, additional_data=data
    )


class TestCreate:
    async def test_create(self, dao, session):
        event = await _add(dao, session, "pr_created", data={"pr_name": "x"})

        assert event.id is not None
        assert event.created_at is not None
        assert event.additional_data == {"pr_name": "x"}

    async def test_ids_increase(self, dao, session):
        first = await _add(dao, session, "pr_created")
        second = await _add(dao, session, "pr_merged")
        assert second.id > first.id

    async def test_no_fk_on_pr_or_user(self, dao, session):
        """The log may refer to rows that do not (or no longer) exist."""
        event = await _add(dao, session, "pr_merged", pr_id="gone", user_id="gone")
        assert event.pr_id == "gone"


class TestCountByType:
    async def test_groups(self, dao, session):
        await _add(dao, session, "pr_created")
        await _add(dao, session, "reviewer_assigned", user_id="u2")
        await _add(dao, session, "reviewer_assigned", user_id="u3")

        assert await dao.count_by_type(session) == {"pr_created": 1, "reviewer_assigned": 2}

    async def test_empty(self, dao, session):
        assert await dao.count_by_type(session) == {}


class TestListByType:
    async def test_filters_and_orders(self, dao, session):
        a = await _add(dao, session, "pr_merged", pr_id="pr-1")
        await _add(dao, session, "pr_created", pr_id="pr-2")
        b = await _add(dao, session, "pr_merged", pr_id="pr-3")

        events = await dao.list_by_type(session, "pr_merged", 10)
        # same transaction, same now(): id breaks the tie
        assert [e.id for e in events] == [b.id, a.id]

    async def test_limit(self, dao, session):
        for i in range(5):
            await _add(dao, session, "reviewer_assigned", user_id=f"u{i}")
        assert len(await dao.list_by_type(session, "reviewer_assigned", 3)) == 3
