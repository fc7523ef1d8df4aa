"""Pull requests router — create, merge, reassign."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from prreview.api.deps import get_pull_request_service, get_session
from prreview.api.schemas.pull_request import (
    CreatePullRequestRequest,
    MergePullRequestRequest,
    PullRequestEnvelope,
    PullRequestResponse,
    ReassignRequest,
    ReassignResponse,
)
from prreview.services.pull_request_service import PullRequestService

router = APIRouter()


@router.post("/create", response_model=PullRequestEnvelope, status_code=201)
async def create_pull_request(
    body: CreatePullRequestRequest,
    session: AsyncSession = Depends(get_session),
    svc: PullRequestService = Depends(get_pull_request_service),
) -> PullRequestEnvelope:
    pr = await svc.create(
        session,
        pr_id=body.pull_request_id,
        name=body.pull_request_name,
        author_id=body.author_id,
    )
    return PullRequestEnvelope(pr=PullRequestResponse.from_model(pr))


@router.post("/merge", response_model=PullRequestEnvelope)
async def merge_pull_request(
    body: MergePullRequestRequest,
    session: AsyncSession = Depends(get_session),
    svc: PullRequestService = Depends(get_pull_request_service),
) -> PullRequestEnvelope:
    pr = await svc.merge(session, body.pull_request_id)
    return PullRequestEnvelope(pr=PullRequestResponse.from_model(pr))


@router.post("/reassign", response_model=ReassignResponse)
async def reassign_reviewer(
    body: ReassignRequest,
    session: AsyncSession = Depends(get_session),
    svc: PullRequestService = Depends(get_pull_request_service),
) -> ReassignResponse:
    pr, new_reviewer_id = await svc.reassign(session, body.pull_request_id, body.old_user_id)
    return ReassignResponse(pr=PullRequestResponse.from_model(pr), replaced_by=new_reviewer_id)
