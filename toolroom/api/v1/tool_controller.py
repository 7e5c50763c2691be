"""
Tool Controller
===============

FastAPI controller for tool inventory endpoints.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from toolroom.api.v1.dependencies import (
    get_current_staff,
    get_tool_service,
    get_tools_catalog,
    http_error,
    require_permission,
)
from toolroom.api.v1.presenters import tool_response
from toolroom.application.dto.tool_dto import (
    ToolCountsResponse,
    ToolCreateRequest,
    ToolDeleteResponse,
    ToolResponse,
    ToolSummaryResponse,
    ToolUpdateRequest,
)
from toolroom.application.services.tool_service import ToolService
from toolroom.application.services.tools_catalog import ToolsCatalog
from toolroom.domain.models.staff import MANAGE_TOOLS, Staff

router = APIRouter(tags=["tools"])


def _loaded_catalog(catalog: ToolsCatalog) -> ToolsCatalog:
    if catalog.has_error and not catalog.retry():
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=catalog.error_message or "Tools are unavailable",
        )
    return catalog


@router.get(
    "",
    response_model=List[ToolResponse],
    summary="List tools",
    description="""
    List tools from the cached catalog, newest-updated first.

    Filters combine: status ("available", "checked_out" or "all"), free-text
    search over name/brand/model/unique id/number, and exact (case-insensitive)
    brand and model.
    """,
)
async def list_tools(
    status_filter: Optional[str] = Query(None, alias="status"),
    search: Optional[str] = None,
    brand: Optional[str] = None,
    model: Optional[str] = None,
    catalog: ToolsCatalog = Depends(get_tools_catalog),
    current: Staff = Depends(get_current_staff),
) -> List[ToolResponse]:
    """List tools with optional filters."""
    tools = _loaded_catalog(catalog).get_filtered_tools(
        status=status_filter,
        search_query=search,
        brand=brand,
        model=model,
    )
    return [tool_response(tool) for tool in tools]


@router.get(
    "/summary",
    response_model=ToolSummaryResponse,
    summary="Tool counts and filter options",
)
async def get_summary(
    catalog: ToolsCatalog = Depends(get_tools_catalog),
    current: Staff = Depends(get_current_staff),
) -> ToolSummaryResponse:
    catalog = _loaded_catalog(catalog)
    return ToolSummaryResponse(
        counts=ToolCountsResponse(**catalog.get_counts()),
        brands=catalog.get_all_brands(),
        models=catalog.get_all_models(),
        loading_state=catalog.loading_state.value,
        error_message=catalog.error_message,
    )


@router.get(
    "/brands/{brand}/models",
    response_model=List[str],
    summary="Models available for a brand",
)
async def get_models_for_brand(
    brand: str,
    catalog: ToolsCatalog = Depends(get_tools_catalog),
    current: Staff = Depends(get_current_staff),
) -> List[str]:
    return _loaded_catalog(catalog).get_models_for_brand(brand)


@router.get(
    "/unique/{unique_id}",
    response_model=ToolResponse,
    summary="Get tool by label code",
    description="Look a tool up by the code printed on its QR label.",
)
async def get_tool_by_unique_id(
    unique_id: str,
    service: ToolService = Depends(get_tool_service),
    current: Staff = Depends(get_current_staff),
) -> ToolResponse:
    tool = service.get_tool_by_unique_id(unique_id)
    if not tool:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Tool '{unique_id}' not found",
        )
    return tool_response(tool)


@router.get(
    "/{tool_id}",
    response_model=ToolResponse,
    summary="Get tool by ID",
)
async def get_tool(
    tool_id: str,
    service: ToolService = Depends(get_tool_service),
    current: Staff = Depends(get_current_staff),
) -> ToolResponse:
    """Get a specific tool by document ID."""
    tool = service.get_tool(tool_id)
    if not tool:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Tool '{tool_id}' not found",
        )
    return tool_response(tool)


@router.post(
    "",
    response_model=ToolResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a tool",
    description="Admin only. A missing unique_id is generated (T + 4 digits).",
)
async def create_tool(
    request: ToolCreateRequest,
    catalog: ToolsCatalog = Depends(get_tools_catalog),
    current: Staff = Depends(require_permission(MANAGE_TOOLS)),
) -> ToolResponse:
    """Add a tool to the inventory."""
    try:
        tool = catalog.create_tool(
            unique_id=request.unique_id or ToolService.generate_unique_id(),
            name=request.name,
            brand=request.brand,
            model=request.model,
            num=request.num,
            images=request.images,
            meta=request.meta,
        )
        return tool_response(tool)
    except ValueError as e:
        raise http_error(e)


@router.patch(
    "/{tool_id}",
    response_model=ToolResponse,
    summary="Edit a tool",
    description="Admin only. Status and holder change only through transactions.",
)
async def update_tool(
    tool_id: str,
    request: ToolUpdateRequest,
    catalog: ToolsCatalog = Depends(get_tools_catalog),
    current: Staff = Depends(require_permission(MANAGE_TOOLS)),
) -> ToolResponse:
    try:
        tool = catalog.update_tool(tool_id, request.model_dump(exclude_none=True))
        return tool_response(tool)
    except ValueError as e:
        raise http_error(e)


@router.delete(
    "/{tool_id}",
    response_model=ToolDeleteResponse,
    summary="Delete a tool",
    description="Admin only. Checked-out tools cannot be deleted.",
)
async def delete_tool(
    tool_id: str,
    catalog: ToolsCatalog = Depends(get_tools_catalog),
    current: Staff = Depends(require_permission(MANAGE_TOOLS)),
) -> ToolDeleteResponse:
    try:
        deleted = catalog.delete_tool(tool_id)
    except ValueError as e:
        raise http_error(e)

    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Tool '{tool_id}' not found",
        )
    return ToolDeleteResponse(
        status="deleted",
        tool_id=tool_id,
        message=f"Tool '{tool_id}' has been deleted",
    )
