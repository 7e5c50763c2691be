"""
Staff DTO
=========

Pydantic models for staff API requests and responses.
"""
from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from toolroom.domain.models.staff import StaffRole


class StaffCreateRequest(BaseModel):
    """DTO for registering a staff member."""
    full_name: str = Field(..., description="Display name")
    email: str = Field(..., description="Contact email")
    job_code: str = Field(..., description="Badge/job code")
    role: StaffRole = Field(StaffRole.WORKER, description="admin, supervisor or worker")
    uid: Optional[str] = Field(None, description="Document id (generated when omitted)")
    team_id: Optional[str] = None
    photo_url: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "full_name": "Mike Worker",
                "email": "worker1@versfeld.com",
                "job_code": "WRK001",
                "role": "worker",
                "team_id": "team-alpha",
            }
        }
    )


class StaffRoleRequest(BaseModel):
    role: StaffRole


class StaffTeamRequest(BaseModel):
    team_id: str


class StaffResponse(BaseModel):
    """DTO for staff data."""
    uid: str
    full_name: str
    job_code: str
    email: str
    role: StaffRole
    role_display_name: str
    initials: str
    team_id: Optional[str] = None
    photo_url: Optional[str] = None
    is_active: bool
    has_auth_account: bool
    assigned_tool_ids: List[str]
    created_at: datetime
    updated_at: datetime
    last_sign_in: Optional[datetime] = None


class StaffCountsResponse(BaseModel):
    counts: Dict[str, int]
