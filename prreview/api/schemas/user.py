"""User request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field

from prreview.api.schemas.pull_request import PullRequestShort


class SetIsActiveRequest(BaseModel):
    user_id: str = Field(min_length=1)
    is_active: bool


class UserResponse(BaseModel):
    user_id: str
    username: str
    team_name: str | None
    is_active: bool


class UserEnvelope(BaseModel):
    user: UserResponse


class UserReviewsResponse(BaseModel):
    user_id: str
    pull_requests: list[PullRequestShort]
