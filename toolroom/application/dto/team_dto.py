"""
Team DTO
========
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class TeamCreateRequest(BaseModel):
    id: str = Field(..., description="Team id, e.g. team-alpha")
    name: str
    description: str = ""
    leader: Optional[str] = Field(None, description="Staff uid of the team leader")


class TeamMemberRequest(BaseModel):
    staff_id: str


class TeamResponse(BaseModel):
    id: str
    name: str
    description: str
    leader: str
    members: List[str]
    member_count: int
    is_active: bool
    created_at: datetime
