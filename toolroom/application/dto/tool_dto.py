"""
Tool DTO
========

Pydantic models for tool API requests and responses.
"""
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ToolCreateRequest(BaseModel):
    """DTO for creating a tool. A missing unique_id is generated."""
    unique_id: Optional[str] = Field(None, description="Code printed on the QR label, e.g. T1001")
    name: str = Field(..., description="Tool name")
    brand: str = Field(..., description="Manufacturer")
    model: str = Field(..., description="Model designation")
    num: str = Field("", description="Serial or asset number")
    images: List[str] = Field(default_factory=list, description="Image URLs")
    meta: Dict[str, Any] = Field(default_factory=dict, description="Free-form metadata")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "unique_id": "T1001",
                "name": "Hammer Drill",
                "brand": "Makita",
                "model": "HP2050",
                "num": "001",
            }
        }
    )


class ToolUpdateRequest(BaseModel):
    """DTO for editing a tool. Only the fields given are changed."""
    unique_id: Optional[str] = None
    name: Optional[str] = None
    brand: Optional[str] = None
    model: Optional[str] = None
    num: Optional[str] = None
    images: Optional[List[str]] = None
    meta: Optional[Dict[str, Any]] = None


class ToolResponse(BaseModel):
    """DTO for tool data."""
    id: str
    unique_id: str
    name: str
    brand: str
    model: str
    num: str
    display_name: str
    images: List[str]
    qr_payload: str
    status: str
    current_holder: Optional[str] = None
    holder_id: Optional[str] = None
    last_assigned_to_name: Optional[str] = None
    last_assigned_to_job_code: Optional[str] = None
    last_assigned_by_name: Optional[str] = None
    last_assigned_at: Optional[datetime] = None
    last_checkin_at: Optional[datetime] = None
    last_checkin_by_name: Optional[str] = None
    meta: Dict[str, Any] = Field(default_factory=dict)
    created_at: datetime
    updated_at: datetime


class ToolCountsResponse(BaseModel):
    total: int
    available: int
    checked_out: int


class ToolSummaryResponse(BaseModel):
    """Counts and filter options for the tools screen."""
    counts: ToolCountsResponse
    brands: List[str]
    models: List[str]
    loading_state: str
    error_message: Optional[str] = None


class ToolDeleteResponse(BaseModel):
    status: str
    tool_id: str
    message: str
