"""PullRequestDAO — pull_requests + pr_reviewers operations."""

from datetime import datetime

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from prreview.dao.base import BaseDAO
from prreview.models.pull_request import PR_STATUS_OPEN, PRReviewer, PullRequest


class PullRequestDAO(BaseDAO[PullRequest]):
    model = PullRequest

    # ── read ──────────────────────────────────────────────────────────────

    async def list_by_reviewer(self, session: AsyncSession, user_id: str) -> list[PullRequest]:
        """PRs where *user_id* is currently a reviewer, newest first."""
        stmt = (
            select(PullRequest)
            .join(PRReviewer, PRReviewer.pr_id == PullRequest.id)
            .where(PRReviewer.user_id == user_id)
            .order_by(PullRequest.created_at.desc(), PullRequest.id)
        )
        result = await session.execute(stmt)
        return list(result.scalars().all())

    async def _reload(self, session: AsyncSession, pr_id: str) -> PullRequest | None:
        stmt = (
            select(PullRequest)
            .where(PullRequest.id == pr_id)
            .options(selectinload(PullRequest.reviewers))
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalars().first()

    # ── write ─────────────────────────────────────────────────────────────

    async def create_with_reviewers(
        self,
        session: AsyncSession,
        *,
        pr_id: str,
        name: str,
        author_id: str,
        reviewer_ids: list[str],
        created_at: datetime,
    ) -> PullRequest:
        """Insert an OPEN PR and its reviewer rows in one savepoint."""
        async with session.begin_nested():
            pr = PullRequest(
                id=pr_id,
                name=name,
                author_id=author_id,
                status=PR_STATUS_OPEN,
                created_at=created_at,
                reviewers=[
                    PRReviewer(user_id=uid, position=pos) for pos, uid in enumerate(reviewer_ids)
                ],
            )
            session.add(pr)
            await session.flush()

        await session.refresh(pr)
        return pr

    async def replace_state(
        self,
        session: AsyncSession,
        pr_id: str,
        *,
        status: str,
        merged_at: datetime | None,
        reviewer_ids: list[str],
    ) -> PullRequest | None:
        """Overwrite the mutable PR fields and its whole reviewer list.

        Runs in one savepoint; reviewer slots follow the order of
        *reviewer_ids*.  Returns the reloaded PR, or None if *pr_id* is
        unknown (nothing is written in that case).
        """
        self._require_pk(pr_id)
        async with session.begin_nested():
            result = await session.execute(
                update(PullRequest)
                .where(PullRequest.id == pr_id)
                .values(status=status, merged_at=merged_at, updated_at=func.now())
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                return None

            await session.execute(
                delete(PRReviewer)
                .where(PRReviewer.pr_id == pr_id)
                .execution_options(synchronize_session=False)
            )
            if reviewer_ids:
                await session.execute(
                    insert(PRReviewer),
                    [
                        {"pr_id": pr_id, "user_id": uid, "position": pos}
                        for pos, uid in enumerate(reviewer_ids)
                    ],
                )

        return await self._reload(session, pr_id)
