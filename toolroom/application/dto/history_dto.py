"""
History DTO
===========

Pydantic models for history and batch responses.
"""
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class HistoryEntryResponse(BaseModel):
    """DTO for one history entry."""
    id: str
    tool_ref: str
    tool_id: Optional[str] = None
    action: str
    action_display_name: str
    by_ref: str
    by_id: Optional[str] = None
    supervisor_ref: Optional[str] = None
    assigned_to_ref: Optional[str] = None
    timestamp: datetime
    formatted_timestamp: str
    notes: Optional[str] = None
    location: Optional[str] = None
    batch_id: Optional[str] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)


class BatchResponse(BaseModel):
    """DTO for a batch record."""
    id: str
    created_by: str
    created_at: datetime
    tool_ids: List[str]
    tool_count: int
    assigned_to_ref: Optional[str] = None
    notes: Optional[str] = None
    action: str
    metadata: Dict[str, Any] = Field(default_factory=dict)


class BatchDetailResponse(BaseModel):
    batch: BatchResponse
    entries: List[HistoryEntryResponse]


class NotesUpdateRequest(BaseModel):
    notes: str


class ActionStatisticsResponse(BaseModel):
    statistics: Dict[str, int]
    daily_count: int


class ActiveStaffResponse(BaseModel):
    staff_id: str
    activity_count: int
