"""Teams router."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from prreview.api.deps import get_session, get_team_service
from prreview.api.schemas.team import (
    CreateTeamRequest,
    CreateTeamResponse,
    TeamMemberResponse,
    TeamResponse,
)
from prreview.services.team_service import TeamMemberInput, TeamService

router = APIRouter()


def _team_response(result: dict) -> TeamResponse:
    return TeamResponse(
        team_name=result["team"].name,
        members=[
            TeamMemberResponse(user_id=u.id, username=u.username, is_active=u.is_active)
            for u in result["members"]
        ],
    )


@router.post("/add", response_model=CreateTeamResponse, status_code=201)
async def add_team(
    body: CreateTeamRequest,
    session: AsyncSession = Depends(get_session),
    svc: TeamService = Depends(get_team_service),
) -> CreateTeamResponse:
    members = [
        TeamMemberInput(user_id=m.user_id, username=m.username, is_active=m.is_active)
        for m in body.members
    ]
    result = await svc.create_team(session, body.team_name, members)
    return CreateTeamResponse(team=_team_response(result))


@router.get("/get", response_model=TeamResponse)
async def get_team(
    team_name: str = Query(..., min_length=1),
    session: AsyncSession = Depends(get_session),
    svc: TeamService = Depends(get_team_service),
) -> TeamResponse:
    result = await svc.get_team(session, team_name)
    return _team_response(result)
