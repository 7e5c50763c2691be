"""
Transaction DTO
===============

Pydantic models for check-out / check-in requests and responses.
"""
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from toolroom.application.dto.history_dto import BatchResponse, HistoryEntryResponse
from toolroom.application.dto.staff_dto import StaffResponse
from toolroom.application.dto.tool_dto import ToolResponse


class CheckOutRequest(BaseModel):
    """DTO for checking one tool out. staff_id defaults to the caller."""
    unique_id: str = Field(..., description="Label code of the tool")
    staff_id: Optional[str] = Field(None, description="Staff member receiving the tool")
    supervisor_id: Optional[str] = None
    notes: Optional[str] = None
    location: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "unique_id": "T1001",
                "staff_id": "worker-001",
                "supervisor_id": "supervisor-001",
                "notes": "Needed for site work",
                "location": "Site A",
            }
        }
    )


class CheckInRequest(BaseModel):
    unique_id: str
    notes: Optional[str] = None
    location: Optional[str] = None


class BatchCheckOutRequest(BaseModel):
    unique_ids: List[str] = Field(..., min_length=1)
    staff_id: Optional[str] = None
    supervisor_id: Optional[str] = None
    notes: Optional[str] = None
    location: Optional[str] = None


class BatchCheckInRequest(BaseModel):
    unique_ids: List[str] = Field(..., min_length=1)
    notes: Optional[str] = None
    location: Optional[str] = None


class TransactionResponse(BaseModel):
    tool: ToolResponse
    entry: HistoryEntryResponse


class BatchOutcomeResponse(BaseModel):
    """Tools written and tools skipped (unique id -> reason)."""
    action: str
    batch: Optional[BatchResponse] = None
    succeeded: List[str]
    failed: Dict[str, str]


class ToolStatusInfoResponse(BaseModel):
    tool: ToolResponse
    assigned_staff: Optional[StaffResponse] = None
    is_available: bool
    is_checked_out: bool
