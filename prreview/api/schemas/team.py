"""Team request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TeamMemberSchema(BaseModel):
    user_id: str = Field(min_length=1)
    username: str = Field(min_length=1)
    is_active: bool = True


class CreateTeamRequest(BaseModel):
    team_name: str = Field(min_length=1)
    members: list[TeamMemberSchema] = Field(default_factory=list)

    @field_validator("team_name", mode="before")
    @classmethod
    def _strip_whitespace(cls, v: str) -> str:
        return v.strip() if isinstance(v, str) else v


class TeamMemberResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: str
    username: str
    is_active: bool


class TeamResponse(BaseModel):
    team_name: str
    members: list[TeamMemberResponse]


class CreateTeamResponse(BaseModel):
    team: TeamResponse
