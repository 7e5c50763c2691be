"""
Dependency Container
====================

FastAPI dependencies: services from the DI container, the calling staff
member and role checks.
"""
from typing import Callable, Optional

from fastapi import Depends, Header, HTTPException, status

from toolroom.application.services.history_service import HistoryService
from toolroom.application.services.staff_service import StaffService
from toolroom.application.services.team_service import TeamService
from toolroom.application.services.tool_service import ToolService
from toolroom.application.services.tools_catalog import ToolsCatalog
from toolroom.application.services.transaction_service import ToolTransactionService
from toolroom.di.container import get_container
from toolroom.domain.exceptions import ConflictError, NotFoundError, PermissionDeniedError
from toolroom.domain.models.staff import Staff


def get_tool_service() -> ToolService:
    """
    Get tool service instance (singleton).

    Returns:
        ToolService instance
    """
    return get_container().get(ToolService)


def get_tools_catalog() -> ToolsCatalog:
    """
    Get the tools catalog instance (singleton).

    Returns:
        ToolsCatalog instance
    """
    return get_container().get(ToolsCatalog)


def get_staff_service() -> StaffService:
    return get_container().get(StaffService)


def get_team_service() -> TeamService:
    return get_container().get(TeamService)


def get_transaction_service() -> ToolTransactionService:
    return get_container().get(ToolTransactionService)


def get_history_service() -> HistoryService:
    return get_container().get(HistoryService)


def get_current_staff(
    x_staff_id: Optional[str] = Header(None, alias="X-Staff-Id"),
    service: StaffService = Depends(get_staff_service),
) -> Staff:
    """
    Resolve the calling staff member from the X-Staff-Id header.

    Raises:
        HTTPException 401: Header missing, unknown staff member or inactive account
    """
    if not x_staff_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="X-Staff-Id header is required",
        )

    staff = service.get_staff(x_staff_id)
    if not staff or not staff.is_active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unknown or inactive staff member",
        )
    return staff


def require_permission(action: str) -> Callable[[Staff], Staff]:
    """
    Build a dependency that only lets through staff allowed to perform `action`.

    Args:
        action: One of the Staff.can_perform_action names, e.g. "manage_tools"
    """
    def dependency(current: Staff = Depends(get_current_staff)) -> Staff:
        if not current.can_perform_action(action):
            raise http_error(PermissionDeniedError(action))
        return current

    return dependency


def http_error(error: Exception) -> HTTPException:
    """Translate a domain error into the matching HTTP error."""
    if isinstance(error, NotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, ConflictError):
        code = status.HTTP_409_CONFLICT
    elif isinstance(error, PermissionDeniedError):
        code = status.HTTP_403_FORBIDDEN
    else:
        code = status.HTTP_400_BAD_REQUEST
    return HTTPException(status_code=code, detail=str(error))
