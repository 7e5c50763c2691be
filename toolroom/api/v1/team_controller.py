"""
Team Controller
===============
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from toolroom.api.v1.dependencies import (
    get_current_staff,
    get_team_service,
    http_error,
    require_permission,
)
from toolroom.api.v1.presenters import staff_response, team_response
from toolroom.application.dto.staff_dto import StaffResponse
from toolroom.application.dto.team_dto import TeamCreateRequest, TeamMemberRequest, TeamResponse
from toolroom.application.services.team_service import TeamService
from toolroom.domain.models.staff import MANAGE_STAFF, Staff

router = APIRouter(tags=["teams"])


@router.get("", response_model=List[TeamResponse], summary="List teams")
async def list_teams(
    active_only: bool = False,
    service: TeamService = Depends(get_team_service),
    current: Staff = Depends(get_current_staff),
) -> List[TeamResponse]:
    return [team_response(team) for team in service.list_teams(active_only=active_only)]


@router.get("/{team_id}", response_model=TeamResponse, summary="Get team")
async def get_team(
    team_id: str,
    service: TeamService = Depends(get_team_service),
    current: Staff = Depends(get_current_staff),
) -> TeamResponse:
    team = service.get_team(team_id)
    if not team:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Team '{team_id}' not found",
        )
    return team_response(team)


@router.get("/{team_id}/members", response_model=List[StaffResponse], summary="Team members")
async def get_members(
    team_id: str,
    service: TeamService = Depends(get_team_service),
    current: Staff = Depends(get_current_staff),
) -> List[StaffResponse]:
    return [staff_response(staff) for staff in service.get_members(team_id)]


@router.post(
    "",
    response_model=TeamResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create team",
)
async def create_team(
    request: TeamCreateRequest,
    service: TeamService = Depends(get_team_service),
    current: Staff = Depends(require_permission(MANAGE_STAFF)),
) -> TeamResponse:
    try:
        team = service.create_team(
            team_id=request.id,
            name=request.name,
            description=request.description,
            leader=request.leader,
        )
        return team_response(team)
    except ValueError as e:
        raise http_error(e)


@router.post("/{team_id}/members", response_model=TeamResponse, summary="Add member")
async def add_member(
    team_id: str,
    request: TeamMemberRequest,
    service: TeamService = Depends(get_team_service),
    current: Staff = Depends(require_permission(MANAGE_STAFF)),
) -> TeamResponse:
    try:
        return team_response(service.add_member(team_id, request.staff_id))
    except ValueError as e:
        raise http_error(e)


@router.delete("/{team_id}/members/{staff_id}", response_model=TeamResponse, summary="Remove member")
async def remove_member(
    team_id: str,
    staff_id: str,
    service: TeamService = Depends(get_team_service),
    current: Staff = Depends(require_permission(MANAGE_STAFF)),
) -> TeamResponse:
    try:
        return team_response(service.remove_member(team_id, staff_id))
    except ValueError as e:
        raise http_error(e)
