"""
History Controller
==================

FastAPI controller for tool history. Staff may read their own history;
everything else needs the view_audit_logs permission (supervisors and
admins). Editing and deleting entries is admin only.
"""
from datetime import date, datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from toolroom.api.v1.dependencies import (
    get_current_staff,
    get_history_service,
    http_error,
    require_permission,
)
from toolroom.api.v1.presenters import batch_response, history_response
from toolroom.application.dto.history_dto import (
    ActionStatisticsResponse,
    ActiveStaffResponse,
    BatchDetailResponse,
    BatchResponse,
    HistoryEntryResponse,
    NotesUpdateRequest,
)
from toolroom.application.services.history_service import HistoryService
from toolroom.domain.exceptions import PermissionDeniedError
from toolroom.domain.models.staff import MANAGE_STAFF, VIEW_AUDIT_LOGS, Staff
from toolroom.domain.models.tool_history import ToolAction

router = APIRouter(tags=["history"])


@router.get(
    "",
    response_model=List[HistoryEntryResponse],
    summary="Search history",
    description="Filter by date range, staff member and action; newest first.",
)
async def get_history(
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
    staff_id: Optional[str] = None,
    action: Optional[ToolAction] = None,
    limit: Optional[int] = Query(None, ge=1, le=500),
    offset: int = Query(0, ge=0),
    service: HistoryService = Depends(get_history_service),
    current: Staff = Depends(require_permission(VIEW_AUDIT_LOGS)),
) -> List[HistoryEntryResponse]:
    entries = service.get_history(
        start=start, end=end, staff_id=staff_id, action=action, limit=limit, offset=offset
    )
    return [history_response(entry) for entry in entries]


@router.get("/recent", response_model=List[HistoryEntryResponse], summary="Recent activity")
async def get_recent(
    limit: int = Query(10, ge=1, le=100),
    service: HistoryService = Depends(get_history_service),
    current: Staff = Depends(require_permission(VIEW_AUDIT_LOGS)),
) -> List[HistoryEntryResponse]:
    return [history_response(entry) for entry in service.get_recent_activity(limit)]


@router.get("/tools/{tool_id}", response_model=List[HistoryEntryResponse], summary="Tool history")
async def get_tool_history(
    tool_id: str,
    limit: Optional[int] = Query(None, ge=1, le=500),
    service: HistoryService = Depends(get_history_service),
    current: Staff = Depends(get_current_staff),
) -> List[HistoryEntryResponse]:
    return [history_response(entry) for entry in service.get_tool_history(tool_id, limit)]


@router.get("/staff/{staff_id}", response_model=List[HistoryEntryResponse], summary="Staff history")
async def get_staff_history(
    staff_id: str,
    limit: Optional[int] = Query(None, ge=1, le=500),
    service: HistoryService = Depends(get_history_service),
    current: Staff = Depends(get_current_staff),
) -> List[HistoryEntryResponse]:
    if staff_id != current.uid and not current.can_perform_action(VIEW_AUDIT_LOGS):
        raise http_error(PermissionDeniedError(VIEW_AUDIT_LOGS))
    return [history_response(entry) for entry in service.get_staff_history(staff_id, limit)]


@router.get("/batches", response_model=List[BatchResponse], summary="List batches")
async def list_batches(
    limit: Optional[int] = Query(None, ge=1, le=500),
    service: HistoryService = Depends(get_history_service),
    current: Staff = Depends(require_permission(VIEW_AUDIT_LOGS)),
) -> List[BatchResponse]:
    return [batch_response(batch) for batch in service.list_batches(limit)]


@router.get("/batches/{batch_id}", response_model=BatchDetailResponse, summary="Batch detail")
async def get_batch(
    batch_id: str,
    service: HistoryService = Depends(get_history_service),
    current: Staff = Depends(require_permission(VIEW_AUDIT_LOGS)),
) -> BatchDetailResponse:
    batch = service.get_batch(batch_id)
    if not batch:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Batch '{batch_id}' not found",
        )
    return BatchDetailResponse(
        batch=batch_response(batch),
        entries=[history_response(entry) for entry in service.get_batch_history(batch_id)],
    )


@router.get("/statistics", response_model=ActionStatisticsResponse, summary="Action statistics")
async def get_statistics(
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
    staff_id: Optional[str] = None,
    day: Optional[date] = None,
    service: HistoryService = Depends(get_history_service),
    current: Staff = Depends(require_permission(VIEW_AUDIT_LOGS)),
) -> ActionStatisticsResponse:
    return ActionStatisticsResponse(
        statistics=service.get_action_statistics(start=start, end=end, staff_id=staff_id),
        daily_count=service.get_daily_activity_count(day),
    )


@router.get("/most-active", response_model=List[ActiveStaffResponse], summary="Most active staff")
async def get_most_active(
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
    limit: int = Query(10, ge=1, le=100),
    service: HistoryService = Depends(get_history_service),
    current: Staff = Depends(require_permission(VIEW_AUDIT_LOGS)),
) -> List[ActiveStaffResponse]:
    ranking = service.get_most_active_staff(start=start, end=end, limit=limit)
    return [
        ActiveStaffResponse(staff_id=row["staffId"], activity_count=row["activityCount"])
        for row in ranking
    ]


@router.get("/{entry_id}", response_model=HistoryEntryResponse, summary="Get history entry")
async def get_entry(
    entry_id: str,
    service: HistoryService = Depends(get_history_service),
    current: Staff = Depends(require_permission(VIEW_AUDIT_LOGS)),
) -> HistoryEntryResponse:
    entry = service.get_entry(entry_id)
    if not entry:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"History entry '{entry_id}' not found",
        )
    return history_response(entry)


@router.put("/{entry_id}/notes", response_model=HistoryEntryResponse, summary="Edit notes")
async def update_notes(
    entry_id: str,
    request: NotesUpdateRequest,
    service: HistoryService = Depends(get_history_service),
    current: Staff = Depends(require_permission(MANAGE_STAFF)),
) -> HistoryEntryResponse:
    if not service.update_notes(entry_id, request.notes):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"History entry '{entry_id}' not found",
        )
    return history_response(service.get_entry(entry_id))


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete entry")
async def delete_entry(
    entry_id: str,
    service: HistoryService = Depends(get_history_service),
    current: Staff = Depends(require_permission(MANAGE_STAFF)),
) -> None:
    if not service.delete_entry(entry_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"History entry '{entry_id}' not found",
        )
