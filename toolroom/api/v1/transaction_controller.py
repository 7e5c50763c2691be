"""
Transaction Controller
======================

FastAPI controller for checking tools out and in.

Any active staff member may check tools out to themselves and check tools
in. Checking out to someone else needs the authorize_checkouts permission
(supervisors and admins).
"""
from fastapi import APIRouter, Depends, HTTPException, status

from toolroom.api.v1.dependencies import (
    get_current_staff,
    get_tools_catalog,
    get_transaction_service,
    http_error,
)
from toolroom.api.v1.presenters import (
    batch_response,
    history_response,
    staff_response,
    tool_response,
)
from toolroom.application.dto.transaction_dto import (
    BatchCheckInRequest,
    BatchCheckOutRequest,
    BatchOutcomeResponse,
    CheckInRequest,
    CheckOutRequest,
    ToolStatusInfoResponse,
    TransactionResponse,
)
from toolroom.application.services.tools_catalog import ToolsCatalog
from toolroom.application.services.transaction_service import ToolTransactionService
from toolroom.application.use_cases.transaction.base import BatchOutcome, TransactionResult
from toolroom.domain.exceptions import PermissionDeniedError
from toolroom.domain.models.staff import AUTHORIZE_CHECKOUTS, Staff

router = APIRouter(tags=["transactions"])


def _resolve_receiver(current: Staff, staff_id: str) -> str:
    receiver = staff_id or current.uid
    if receiver != current.uid and not current.can_perform_action(AUTHORIZE_CHECKOUTS):
        raise http_error(
            PermissionDeniedError(
                AUTHORIZE_CHECKOUTS, "Only supervisors can check tools out to other staff"
            )
        )
    return receiver


def _transaction_response(result: TransactionResult) -> TransactionResponse:
    return TransactionResponse(
        tool=tool_response(result.tool),
        entry=history_response(result.entry),
    )


def _outcome_response(outcome: BatchOutcome) -> BatchOutcomeResponse:
    return BatchOutcomeResponse(
        action=outcome.action.value,
        batch=batch_response(outcome.batch) if outcome.batch else None,
        succeeded=outcome.succeeded,
        failed=outcome.failed,
    )


@router.post(
    "/check-out",
    response_model=TransactionResponse,
    summary="Check a tool out",
    description="""
    Check one tool out. Without staff_id the tool goes to the caller.

    The tool, the receiver's assigned tools and a history entry are
    written together.
    """,
)
async def check_out(
    request: CheckOutRequest,
    service: ToolTransactionService = Depends(get_transaction_service),
    catalog: ToolsCatalog = Depends(get_tools_catalog),
    current: Staff = Depends(get_current_staff),
) -> TransactionResponse:
    receiver = _resolve_receiver(current, request.staff_id)
    try:
        result = service.check_out_tool(
            unique_id=request.unique_id,
            staff_id=receiver,
            performed_by=current.uid,
            supervisor_id=request.supervisor_id,
            notes=request.notes,
            location=request.location,
        )
    except ValueError as e:
        raise http_error(e)

    catalog.invalidate()
    return _transaction_response(result)


@router.post("/check-in", response_model=TransactionResponse, summary="Check a tool in")
async def check_in(
    request: CheckInRequest,
    service: ToolTransactionService = Depends(get_transaction_service),
    catalog: ToolsCatalog = Depends(get_tools_catalog),
    current: Staff = Depends(get_current_staff),
) -> TransactionResponse:
    try:
        result = service.check_in_tool(
            unique_id=request.unique_id,
            performed_by=current.uid,
            notes=request.notes,
            location=request.location,
        )
    except ValueError as e:
        raise http_error(e)

    catalog.invalidate()
    return _transaction_response(result)


@router.post(
    "/batch/check-out",
    response_model=BatchOutcomeResponse,
    summary="Check several tools out",
    description="""
    Tools that are missing or already checked out are listed under
    `failed`; the rest are written together with one batch record.
    """,
)
async def batch_check_out(
    request: BatchCheckOutRequest,
    service: ToolTransactionService = Depends(get_transaction_service),
    catalog: ToolsCatalog = Depends(get_tools_catalog),
    current: Staff = Depends(get_current_staff),
) -> BatchOutcomeResponse:
    receiver = _resolve_receiver(current, request.staff_id)
    try:
        outcome = service.batch_check_out(
            unique_ids=request.unique_ids,
            staff_id=receiver,
            performed_by=current.uid,
            supervisor_id=request.supervisor_id,
            notes=request.notes,
            location=request.location,
        )
    except ValueError as e:
        raise http_error(e)

    catalog.invalidate()
    return _outcome_response(outcome)


@router.post(
    "/batch/check-in",
    response_model=BatchOutcomeResponse,
    summary="Check several tools in",
)
async def batch_check_in(
    request: BatchCheckInRequest,
    service: ToolTransactionService = Depends(get_transaction_service),
    catalog: ToolsCatalog = Depends(get_tools_catalog),
    current: Staff = Depends(get_current_staff),
) -> BatchOutcomeResponse:
    try:
        outcome = service.batch_check_in(
            unique_ids=request.unique_ids,
            performed_by=current.uid,
            notes=request.notes,
            location=request.location,
        )
    except ValueError as e:
        raise http_error(e)

    catalog.invalidate()
    return _outcome_response(outcome)


@router.get(
    "/status/{unique_id}",
    response_model=ToolStatusInfoResponse,
    summary="Tool status and current holder",
)
async def get_status(
    unique_id: str,
    service: ToolTransactionService = Depends(get_transaction_service),
    current: Staff = Depends(get_current_staff),
) -> ToolStatusInfoResponse:
    info = service.get_tool_status_info(unique_id)
    if not info:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Tool '{unique_id}' not found",
        )
    holder = info["assigned_staff"]
    return ToolStatusInfoResponse(
        tool=tool_response(info["tool"]),
        assigned_staff=staff_response(holder) if holder else None,
        is_available=info["is_available"],
        is_checked_out=info["is_checked_out"],
    )
