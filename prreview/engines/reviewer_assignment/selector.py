"""Random reviewer selection over a team's member list.

The selector only sees plain member records; fetching the team and
persisting the outcome is the lifecycle service's job.
"""

from __future__ import annotations

import logging
import random
import time
from collections.abc import Iterable, Sequence
from typing import Protocol

logger = logging.getLogger(__name__)

MAX_INITIAL_REVIEWERS = 2


class Member(Protocol):
    """What the selector needs from a user record."""

    id: str
    is_active: bool


class ReviewerSelector:
    """Chooses reviewers with its own random source.

    Pass a seeded ``random.Random`` for reproducible picks; by default the
    generator is seeded from the wall clock once, at construction.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random(time.time_ns())

    def select_initial(self, members: Iterable[Member], author_id: str) -> list[str]:
        """Pick up to two distinct active teammates of *author_id*.

        Every ordering of the eligible pool is equally likely before it is
        cut to ``MAX_INITIAL_REVIEWERS``.  An empty pool yields ``[]``.
        """
        pool = _unique_ids(m for m in members if m.is_active and m.id != author_id)
        if not pool:
            logger.debug("no eligible reviewers besides author %s", author_id)
            return []
        self._rng.shuffle(pool)
        return pool[: min(MAX_INITIAL_REVIEWERS, len(pool))]

    def select_replacement(
        self,
        members: Iterable[Member],
        *,
        author_id: str,
        old_reviewer_id: str,
        current_reviewers: Sequence[str],
    ) -> str | None:
        """Pick one active member to take over from *old_reviewer_id*.

        *members* is the outgoing reviewer's team.  The author, the outgoing
        reviewer and anyone already reviewing are skipped.  Returns None
        when nobody is left.
        """
        excluded = {author_id, old_reviewer_id, *current_reviewers}
        pool = _unique_ids(m for m in members if m.is_active and m.id not in excluded)
        if not pool:
            return None
        return self._rng.choice(pool)


def _unique_ids(members: Iterable[Member]) -> list[str]:
    seen: dict[str, None] = {}
    for m in members:
        seen.setdefault(m.id, None)
    return list(seen)
