"""
Staff Controller
================

FastAPI controller for staff endpoints. Reads are open to any active
staff member; writes need the manage_staff permission (admins).
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from toolroom.api.v1.dependencies import (
    get_current_staff,
    get_staff_service,
    get_transaction_service,
    http_error,
    require_permission,
)
from toolroom.api.v1.presenters import staff_response, tool_response
from toolroom.application.dto.staff_dto import (
    StaffCountsResponse,
    StaffCreateRequest,
    StaffResponse,
    StaffRoleRequest,
    StaffTeamRequest,
)
from toolroom.application.dto.tool_dto import ToolResponse
from toolroom.application.services.staff_service import StaffService
from toolroom.application.services.transaction_service import ToolTransactionService
from toolroom.domain.models.staff import MANAGE_STAFF, Staff, StaffRole

router = APIRouter(tags=["staff"])


@router.get("/me", response_model=StaffResponse, summary="The calling staff member")
async def get_me(current: Staff = Depends(get_current_staff)) -> StaffResponse:
    return staff_response(current)


@router.get(
    "",
    response_model=List[StaffResponse],
    summary="List staff",
    description="Active staff ordered by name. Filter by role, team or search text.",
)
async def list_staff(
    role: Optional[StaffRole] = None,
    team_id: Optional[str] = None,
    search: Optional[str] = None,
    include_inactive: bool = False,
    service: StaffService = Depends(get_staff_service),
    current: Staff = Depends(get_current_staff),
) -> List[StaffResponse]:
    if search:
        members = service.search_staff(search, role=role, active_only=not include_inactive)
        if team_id:
            members = [staff for staff in members if staff.team_id == team_id]
    else:
        members = service.list_staff(include_inactive=include_inactive, role=role, team_id=team_id)
    return [staff_response(staff) for staff in members]


@router.get("/supervisors", response_model=List[StaffResponse], summary="List supervisors")
async def list_supervisors(
    service: StaffService = Depends(get_staff_service),
    current: Staff = Depends(get_current_staff),
) -> List[StaffResponse]:
    return [staff_response(staff) for staff in service.list_supervisors()]


@router.get("/counts", response_model=StaffCountsResponse, summary="Staff counts per role")
async def get_counts(
    service: StaffService = Depends(get_staff_service),
    current: Staff = Depends(get_current_staff),
) -> StaffCountsResponse:
    return StaffCountsResponse(counts=service.get_counts())


@router.get("/{uid}", response_model=StaffResponse, summary="Get staff member")
async def get_staff(
    uid: str,
    service: StaffService = Depends(get_staff_service),
    current: Staff = Depends(get_current_staff),
) -> StaffResponse:
    staff = service.get_staff(uid)
    if not staff:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Staff member '{uid}' not found",
        )
    return staff_response(staff)


@router.get(
    "/{uid}/tools",
    response_model=List[ToolResponse],
    summary="Tools assigned to a staff member",
)
async def get_assigned_tools(
    uid: str,
    service: ToolTransactionService = Depends(get_transaction_service),
    current: Staff = Depends(get_current_staff),
) -> List[ToolResponse]:
    return [tool_response(tool) for tool in service.get_tools_assigned_to(uid)]


@router.post(
    "",
    response_model=StaffResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a staff member",
)
async def create_staff(
    request: StaffCreateRequest,
    service: StaffService = Depends(get_staff_service),
    current: Staff = Depends(require_permission(MANAGE_STAFF)),
) -> StaffResponse:
    try:
        staff = service.create_staff(
            full_name=request.full_name,
            email=request.email,
            job_code=request.job_code,
            role=request.role,
            uid=request.uid,
            team_id=request.team_id,
            photo_url=request.photo_url,
        )
        return staff_response(staff)
    except ValueError as e:
        raise http_error(e)


@router.put("/{uid}/role", response_model=StaffResponse, summary="Change role")
async def change_role(
    uid: str,
    request: StaffRoleRequest,
    service: StaffService = Depends(get_staff_service),
    current: Staff = Depends(require_permission(MANAGE_STAFF)),
) -> StaffResponse:
    try:
        return staff_response(service.change_role(uid, request.role))
    except ValueError as e:
        raise http_error(e)


@router.post("/{uid}/deactivate", response_model=StaffResponse, summary="Deactivate")
async def deactivate_staff(
    uid: str,
    service: StaffService = Depends(get_staff_service),
    current: Staff = Depends(require_permission(MANAGE_STAFF)),
) -> StaffResponse:
    if uid == current.uid:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="You cannot deactivate your own account",
        )
    try:
        return staff_response(service.deactivate_staff(uid))
    except ValueError as e:
        raise http_error(e)


@router.post("/{uid}/activate", response_model=StaffResponse, summary="Reactivate")
async def activate_staff(
    uid: str,
    service: StaffService = Depends(get_staff_service),
    current: Staff = Depends(require_permission(MANAGE_STAFF)),
) -> StaffResponse:
    try:
        return staff_response(service.reactivate_staff(uid))
    except ValueError as e:
        raise http_error(e)


@router.put(
    "/{uid}/team",
    response_model=StaffResponse,
    summary="Assign to team",
    description="Moves the member out of any previous team and into this one.",
)
async def assign_team(
    uid: str,
    request: StaffTeamRequest,
    service: StaffService = Depends(get_staff_service),
    current: Staff = Depends(require_permission(MANAGE_STAFF)),
) -> StaffResponse:
    try:
        return staff_response(service.assign_to_team(uid, request.team_id))
    except ValueError as e:
        raise http_error(e)


@router.delete("/{uid}/team", response_model=StaffResponse, summary="Remove from team")
async def remove_team(
    uid: str,
    service: StaffService = Depends(get_staff_service),
    current: Staff = Depends(require_permission(MANAGE_STAFF)),
) -> StaffResponse:
    try:
        return staff_response(service.remove_from_team(uid))
    except ValueError as e:
        raise http_error(e)
