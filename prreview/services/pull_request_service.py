"""PullRequestService — PR lifecycle: create, merge, reviewer reassignment.

State changes go through :class:`PullRequestDAO` inside the caller's
transaction.  Audit events are written afterwards via
:class:`EventService`, which swallows its own failures: a lost event never
undoes a lifecycle change.
"""

from __future__ import annotations

from datetime import datetime, timezone

import structlog
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from prreview.dao.pull_request_dao import PullRequestDAO
from prreview.engines.reviewer_assignment import ReviewerSelector
from prreview.events import (
    PRCreatedPayload,
    PRMergedPayload,
    ReviewerAssignedPayload,
    ReviewerReassignedPayload,
)
from prreview.models.pull_request import PR_STATUS_MERGED, PullRequest
from prreview.services import (
    NoCandidateError,
    PullRequestExistsError,
    PullRequestMergedError,
    PullRequestNotFoundError,
    ReviewerNotAssignedError,
    TeamNotFoundError,
)
from prreview.services.event_service import EventService
from prreview.services.user_service import UserService

log = structlog.get_logger("prreview.service")


def _now() -> datetime:
    return datetime.now(timezone.utc)


class PullRequestService:
    """Owns PR state transitions; holds no per-request state.

    The only instance state is the reviewer selector and its random
    source, shared by all requests.
    """

    def __init__(
        self,
        pr_dao: PullRequestDAO,
        user_service: UserService,
        event_service: EventService,
        selector: ReviewerSelector,
    ) -> None:
        self._pr_dao = pr_dao
        self._users = user_service
        self._events = event_service
        self._selector = selector

    # ── lifecycle ────────────────────────────────────────────────────────

    async def create(
        self,
        session: AsyncSession,
        *,
        pr_id: str,
        name: str,
        author_id: str,
    ) -> PullRequest:
        """Open a PR and auto-assign up to two reviewers from the author's team.

        Raises :class:`PullRequestExistsError`, :class:`UserNotFoundError`
        or :class:`TeamNotFoundError`.  Zero eligible teammates is not an
        error: the PR is created without reviewers.
        """
        # 1. Uniqueness before any write
        if await self._pr_dao.exists(session, pr_id):
            raise PullRequestExistsError(f"pull request '{pr_id}' already exists")

        # 2. Author and team
        author = await self._users.get(session, author_id)
        if not author.team_name:
            raise TeamNotFoundError(f"user '{author_id}' is not in a team")

        # 3. Reviewers
        members = await self._users.get_team_members(session, author.team_name)
        reviewer_ids = self._selector.select_initial(members, author_id)

        # 4. PR row + reviewer rows together
        created_at = _now()
        try:
            pr = await self._pr_dao.create_with_reviewers(
                session,
                pr_id=pr_id,
                name=name,
                author_id=author_id,
                reviewer_ids=reviewer_ids,
                created_at=created_at,
            )
        except IntegrityError:
            # a concurrent create committed the same id after step 1
            if await self._pr_dao.exists(session, pr_id):
                log.debug("pr.duplicate_create", pr_id=pr_id)
                raise PullRequestExistsError(
                    f"pull request '{pr_id}' already exists"
                ) from None
            raise
        log.info(
            "pr.created",
            pr_id=pr_id,
            author_id=author_id,
            team_name=author.team_name,
            reviewers=reviewer_ids,
        )

        # 5. Audit
        await self._events.record(
            session,
            PRCreatedPayload(pr_name=name, created_at=created_at),
            pr_id=pr_id,
            user_id=author_id,
        )
        for reviewer_id in reviewer_ids:
            await self._events.record(
                session,
                ReviewerAssignedPayload(assigned_at=created_at),
                pr_id=pr_id,
                user_id=reviewer_id,
            )
        return pr

    async def merge(self, session: AsyncSession, pr_id: str) -> PullRequest:
        """Mark a PR as MERGED.

        Idempotent: merging an already merged PR returns it untouched, with
        no write and no event.
        """
        pr = await self._get_pr(session, pr_id)
        if pr.is_merged:
            return pr

        merged_at = _now()
        updated = await self._pr_dao.replace_state(
            session,
            pr.id,
            status=PR_STATUS_MERGED,
            merged_at=merged_at,
            reviewer_ids=pr.assigned_reviewers,
        )
        if updated is None:
            raise PullRequestNotFoundError(f"pull request '{pr_id}' not found")
        log.info("pr.merged", pr_id=pr_id)

        await self._events.record(
            session,
            PRMergedPayload(merged_at=merged_at),
            pr_id=pr_id,
            user_id=pr.author_id,
        )
        return updated

    async def reassign(
        self,
        session: AsyncSession,
        pr_id: str,
        old_reviewer_id: str,
    ) -> tuple[PullRequest, str]:
        """Swap *old_reviewer_id* for a random teammate of theirs.

        The new reviewer takes the old one's slot.  Returns the updated PR
        and the new reviewer id.

        Raises :class:`PullRequestNotFoundError`,
        :class:`PullRequestMergedError`, :class:`ReviewerNotAssignedError`
        or :class:`NoCandidateError`; nothing is written in those cases.
        """
        pr = await self._get_pr(session, pr_id)
        if not pr.can_modify_reviewers():
            raise PullRequestMergedError(f"pull request '{pr_id}' is merged")

        current = pr.assigned_reviewers
        if old_reviewer_id not in current:
            log.warning(
                "pr.reviewer_not_assigned",
                pr_id=pr_id,
                old_reviewer_id=old_reviewer_id,
                assigned_reviewers=current,
            )
            raise ReviewerNotAssignedError(
                f"user '{old_reviewer_id}' is not a reviewer of '{pr_id}'"
            )

        new_reviewer_id = await self._find_replacement(session, pr, old_reviewer_id)

        reviewers = list(current)
        reviewers[reviewers.index(old_reviewer_id)] = new_reviewer_id
        updated = await self._pr_dao.replace_state(
            session,
            pr.id,
            status=pr.status,
            merged_at=pr.merged_at,
            reviewer_ids=reviewers,
        )
        if updated is None:
            raise PullRequestNotFoundError(f"pull request '{pr_id}' not found")
        log.info(
            "pr.reviewer_reassigned",
            pr_id=pr_id,
            old_reviewer_id=old_reviewer_id,
            new_reviewer_id=new_reviewer_id,
        )

        await self._events.record(
            session,
            ReviewerReassignedPayload(
                old_user_id=old_reviewer_id,
                new_user_id=new_reviewer_id,
                reassigned_at=_now(),
            ),
            pr_id=pr_id,
            user_id=new_reviewer_id,
        )
        return updated, new_reviewer_id

    # ── reads ────────────────────────────────────────────────────────────

    async def get(self, session: AsyncSession, pr_id: str) -> PullRequest:
        """Raises :class:`PullRequestNotFoundError` if the PR does not exist."""
        return await self._get_pr(session, pr_id)

    async def get_user_reviews(self, session: AsyncSession, user_id: str) -> list[PullRequest]:
        """PRs *user_id* currently reviews, newest first. Unknown users get []."""
        return await self._pr_dao.list_by_reviewer(session, user_id)

    # ── private helpers ──────────────────────────────────────────────────

    async def _get_pr(self, session: AsyncSession, pr_id: str) -> PullRequest:
        pr = await self._pr_dao.get_by_id(session, pr_id)
        if pr is None:
            raise PullRequestNotFoundError(f"pull request '{pr_id}' not found")
        return pr

    async def _find_replacement(
        self, session: AsyncSession, pr: PullRequest, old_reviewer_id: str
    ) -> str:
        # Search the outgoing reviewer's team, not the author's.
        old_reviewer = await self._users.get(session, old_reviewer_id)
        if not old_reviewer.team_name:
            raise NoCandidateError(f"reviewer '{old_reviewer_id}' is not in a team")

        members = await self._users.get_team_members(session, old_reviewer.team_name)
        new_id = self._selector.select_replacement(
            members,
            author_id=pr.author_id,
            old_reviewer_id=old_reviewer_id,
            current_reviewers=pr.assigned_reviewers,
        )
        if new_id is None:
            raise NoCandidateError(
                f"no active replacement candidate in team '{old_reviewer.team_name}'"
            )
        return new_id
