"""Tests for ReviewerSelector."""

import random
from collections import Counter
from dataclasses import dataclass

from prreview.engines.reviewer_assignment import MAX_INITIAL_REVIEWERS, ReviewerSelector


@dataclass
class _Member:
    id: str
    is_active: bool = True


def _team(*ids: str, inactive: tuple[str, ...] = ()) -> list[_Member]:
    return [_Member(uid, uid not in inactive) for uid in ids]


def _selector(seed: int = 42) -> ReviewerSelector:
    return ReviewerSelector(random.Random(seed))


# ── select_initial ───────────────────────────────────────────────────────


class TestSelectInitial:
    def test_picks_two_from_large_team(self):
        members = _team("u1", "u2", "u3", "u4", "u5")
        picked = _selector().select_initial(members, "u1")

        assert len(picked) == MAX_INITIAL_REVIEWERS == 2
        assert len(set(picked)) == 2
        assert "u1" not in picked
        assert set(picked) <= {"u2", "u3", "u4", "u5"}

    def test_single_candidate(self):
        picked = _selector().select_initial(_team("a", "b"), "a")
        assert picked == ["b"]

    def test_author_alone(self):
        assert _selector().select_initial(_team("a"), "a") == []

    def test_empty_team(self):
        assert _selector().select_initial([], "a") == []

    def test_inactive_members_skipped(self):
        members = _team("u1", "u2", "u3", "u4", inactive=("u2", "u3"))
        picked = _selector().select_initial(members, "u1")
        assert picked == ["u4"]

    def test_all_teammates_inactive(self):
        members = _team("u1", "u2", "u3", inactive=("u2", "u3"))
        assert _selector().select_initial(members, "u1") == []

    def test_duplicate_member_records_collapse(self):
        members = [_Member("a"), _Member("b"), _Member("b"), _Member("b")]
        assert _selector().select_initial(members, "a") == ["b"]

    def test_author_not_in_team_is_ignored(self):
        """The author id only excludes; it need not appear in the list."""
        picked = _selector().select_initial(_team("x", "y"), "author")
        assert sorted(picked) == ["x", "y"]

    def test_same_seed_same_result(self):
        members = _team("u1", "u2", "u3", "u4", "u5", "u6")
        first = _selector(7).select_initial(members, "u1")
        second = _selector(7).select_initial(members, "u1")
        assert first == second

    def test_every_candidate_can_be_picked(self):
        members = _team("u1", "u2", "u3", "u4", "u5")
        selector = _selector(1)
        seen: Counter[str] = Counter()
        for _ in range(400):
            seen.update(selector.select_initial(members, "u1"))
        assert set(seen) == {"u2", "u3", "u4", "u5"}
        # roughly uniform: each appears in about half of the draws
        assert all(120 < n < 280 for n in seen.values())

    def test_does_not_mutate_input(self):
        members = _team("u1", "u2", "u3", "u4")
        before = [m.id for m in members]
        _selector().select_initial(members, "u1")
        assert [m.id for m in members] == before

    def test_default_rng(self):
        picked = ReviewerSelector().select_initial(_team("a", "b", "c"), "a")
        assert sorted(picked) == ["b", "c"]


# ── select_replacement ───────────────────────────────────────────────────


class TestSelectReplacement:
    def test_excludes_author_old_and_current(self):
        members = _team("u1", "u2", "u3", "u4", "u5")
        for seed in range(50):
            new_id = _selector(seed).select_replacement(
                members,
                author_id="u1",
                old_reviewer_id="u2",
                current_reviewers=["u2", "u3"],
            )
            assert new_id in {"u4", "u5"}

    def test_only_one_candidate(self):
        members = _team("u1", "u2", "u3", "u4")
        new_id = _selector().select_replacement(
            members, author_id="u1", old_reviewer_id="u2", current_reviewers=["u2", "u3"]
        )
        assert new_id == "u4"

    def test_no_candidate(self):
        members = _team("u1", "u2", "u3")
        new_id = _selector().select_replacement(
            members, author_id="u1", old_reviewer_id="u2", current_reviewers=["u2", "u3"]
        )
        assert new_id is None

    def test_inactive_candidates_skipped(self):
        members = _team("u1", "u2", "u3", "u4", inactive=("u4",))
        new_id = _selector().select_replacement(
            members, author_id="u1", old_reviewer_id="u2", current_reviewers=["u2"]
        )
        assert new_id == "u3"

    def test_author_from_another_team(self):
        """Author exclusion applies even when the author is not in *members*."""
        members = _team("r1", "r2", "r3")
        new_id = _selector().select_replacement(
            members, author_id="outsider", old_reviewer_id="r1", current_reviewers=["r1"]
        )
        assert new_id in {"r2", "r3"}

    def test_empty_members(self):
        new_id = _selector().select_replacement(
            [], author_id="a", old_reviewer_id="b", current_reviewers=["b"]
        )
        assert new_id is None
