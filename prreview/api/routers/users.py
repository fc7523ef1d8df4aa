"""Users router — reviewer eligibility and review queues."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from prreview.api.deps import get_pull_request_service, get_session, get_user_service
from prreview.api.schemas.pull_request import PullRequestShort
from prreview.api.schemas.user import (
    SetIsActiveRequest,
    UserEnvelope,
    UserResponse,
    UserReviewsResponse,
)
from prreview.services.pull_request_service import PullRequestService
from prreview.services.user_service import UserService

router = APIRouter()


@router.post("/setIsActive", response_model=UserEnvelope)
async def set_is_active(
    body: SetIsActiveRequest,
    session: AsyncSession = Depends(get_session),
    svc: UserService = Depends(get_user_service),
) -> UserEnvelope:
    user = await svc.set_is_active(session, body.user_id, body.is_active)
    return UserEnvelope(
        user=UserResponse(
            user_id=user.id,
            username=user.username,
            team_name=user.team_name,
            is_active=user.is_active,
        )
    )


@router.get("/getReview", response_model=UserReviewsResponse)
async def get_review(
    user_id: str = Query(..., min_length=1),
    session: AsyncSession = Depends(get_session),
    svc: PullRequestService = Depends(get_pull_request_service),
) -> UserReviewsResponse:
    prs = await svc.get_user_reviews(session, user_id)
    return UserReviewsResponse(
        user_id=user_id, pull_requests=[PullRequestShort.from_model(pr) for pr in prs]
    )
