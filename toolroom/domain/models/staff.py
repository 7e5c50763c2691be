"""
Staff Model
===========

Domain model representing a staff member and the role-based permissions
that drive what each member may see and do.
This is a pure domain object with no infrastructure dependencies.
"""
from datetime import datetime
from enum import Enum
from typing import List, Optional
from dataclasses import dataclass, field

from toolroom.utils.datetime_utils import now


class StaffRole(str, Enum):
    """Staff roles in the system."""
    ADMIN = "admin"
    SUPERVISOR = "supervisor"
    WORKER = "worker"

    @classmethod
    def from_string(cls, role: Optional[str]) -> "StaffRole":
        """Parse a stored role; anything unrecognised is a worker."""
        try:
            return cls((role or "").strip().lower())
        except ValueError:
            return cls.WORKER

    @property
    def is_admin(self) -> bool:
        return self is StaffRole.ADMIN

    @property
    def is_supervisor(self) -> bool:
        """Supervisors and admins."""
        return self is StaffRole.SUPERVISOR or self.is_admin

    @property
    def can_manage_tools(self) -> bool:
        return self.is_admin

    @property
    def can_manage_staff(self) -> bool:
        return self.is_admin

    @property
    def can_authorize_checkouts(self) -> bool:
        return self.is_supervisor

    @property
    def can_view_audit_logs(self) -> bool:
        return self.is_supervisor

    @property
    def display_name(self) -> str:
        return {
            StaffRole.ADMIN: "Administrator",
            StaffRole.SUPERVISOR: "Supervisor",
            StaffRole.WORKER: "Worker",
        }[self]


# Actions accepted by Staff.can_perform_action
MANAGE_TOOLS = "manage_tools"
MANAGE_STAFF = "manage_staff"
AUTHORIZE_CHECKOUTS = "authorize_checkouts"
VIEW_AUDIT_LOGS = "view_audit_logs"


@dataclass
class Staff:
    """
    Staff domain model.

    The uid doubles as the document id. `is_active` is stored as given;
    nothing derives it.
    """
    uid: str
    full_name: str
    job_code: str
    email: str
    role: StaffRole = StaffRole.WORKER
    auth_uid: Optional[str] = None
    team_id: Optional[str] = None
    photo_url: Optional[str] = None
    is_active: bool = True
    has_auth_account: bool = False
    assigned_tool_ids: List[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: now())
    updated_at: datetime = field(default_factory=lambda: now())
    last_sign_in: Optional[datetime] = None

    @property
    def initials(self) -> str:
        """First letters of the first and last name, e.g. "JA"."""
        names = self.full_name.split()
        if len(names) >= 2:
            return f"{names[0][0]}{names[-1][0]}".upper()
        if names:
            return names[0][0].upper()
        return "U"

    @property
    def display_name_with_job(self) -> str:
        return f"{self.full_name} ({self.job_code})"

    @property
    def role_display_name(self) -> str:
        return self.role.display_name

    def can_perform_action(self, action: str) -> bool:
        """Check a named permission against this member's role."""
        checks = {
            MANAGE_TOOLS: self.role.can_manage_tools,
            MANAGE_STAFF: self.role.can_manage_staff,
            AUTHORIZE_CHECKOUTS: self.role.can_authorize_checkouts,
            VIEW_AUDIT_LOGS: self.role.can_view_audit_logs,
        }
        return checks.get(action, False)

    def activate(self) -> None:
        """Reactivate the staff member."""
        self.is_active = True
        self.updated_at = now()

    def deactivate(self) -> None:
        """Deactivate the staff member (records are never hard-deleted)."""
        self.is_active = False
        self.updated_at = now()

    def change_role(self, role: StaffRole) -> None:
        self.role = role
        self.updated_at = now()

    def assign_to_team(self, team_id: str) -> None:
        if not team_id or not team_id.strip():
            raise ValueError("Team ID cannot be empty")
        self.team_id = team_id.strip()
        self.updated_at = now()

    def remove_from_team(self) -> None:
        self.team_id = None
        self.updated_at = now()

    def __str__(self) -> str:
        return f"Staff(uid: {self.uid}, name: {self.full_name}, role: {self.role.value})"
