"""Pull request request/response schemas.

Timestamps go out as ``createdAt`` / ``mergedAt``; every other field is
snake_case.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import AliasChoices, BaseModel, Field

from prreview.models.pull_request import PullRequest


class CreatePullRequestRequest(BaseModel):
    pull_request_id: str = Field(min_length=1)
    pull_request_name: str = Field(min_length=1)
    author_id: str = Field(min_length=1)


class MergePullRequestRequest(BaseModel):
    pull_request_id: str = Field(min_length=1)


class ReassignRequest(BaseModel):
    pull_request_id: str = Field(min_length=1)
    # older clients send old_reviewer_id
    old_user_id: str = Field(
        min_length=1,
        validation_alias=AliasChoices("old_user_id", "old_reviewer_id"),
    )


class PullRequestShort(BaseModel):
    pull_request_id: str
    pull_request_name: str
    author_id: str
    status: str

    @classmethod
    def from_model(cls, pr: PullRequest) -> PullRequestShort:
        return cls(
            pull_request_id=pr.id,
            pull_request_name=pr.name,
            author_id=pr.author_id,
            status=pr.status,
        )


class PullRequestResponse(PullRequestShort):
    assigned_reviewers: list[str]
    created_at: datetime = Field(serialization_alias="createdAt")
    merged_at: datetime | None = Field(default=None, serialization_alias="mergedAt")

    @classmethod
    def from_model(cls, pr: PullRequest) -> PullRequestResponse:
        return cls(
            pull_request_id=pr.id,
            pull_request_name=pr.name,
            author_id=pr.author_id,
            status=pr.status,
            assigned_reviewers=pr.assigned_reviewers,
            created_at=pr.created_at,
            merged_at=pr.merged_at,
        )


class PullRequestEnvelope(BaseModel):
    pr: PullRequestResponse


class ReassignResponse(BaseModel):
    pr: PullRequestResponse
    replaced_by: str
