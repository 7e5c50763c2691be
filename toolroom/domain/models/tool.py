"""
Tool Model
==========

Domain model representing a workshop tool.
This is a pure domain object with no infrastructure dependencies.
"""
from datetime import datetime
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field

from toolroom.domain.models.staff import Staff
from toolroom.domain.references import ref_id, staff_ref
from toolroom.utils.datetime_utils import now


class ToolStatus:
    """Tool status values"""
    AVAILABLE = "available"
    CHECKED_OUT = "checked_out"

    ALL = (AVAILABLE, CHECKED_OUT)


QR_PREFIX = "TOOL#"


@dataclass
class Tool:
    """
    Tool domain model.

    `unique_id` is the code printed on the QR label; `id` is the document id.
    The last-assignment fields are denormalised so list screens can show who
    has a tool without reading history.
    """
    id: str
    unique_id: str
    name: str
    brand: str
    model: str
    num: str = ""
    images: List[str] = field(default_factory=list)
    qr_payload: str = ""
    status: str = ToolStatus.AVAILABLE
    current_holder: Optional[str] = None  # "staff/<uid>"
    last_assigned_to_name: Optional[str] = None
    last_assigned_to_job_code: Optional[str] = None
    last_assigned_by_name: Optional[str] = None
    last_assigned_at: Optional[datetime] = None
    last_checkin_at: Optional[datetime] = None
    last_checkin_by_name: Optional[str] = None
    meta: Dict[str, Any] = field(default_factory=dict)
    created_at: datetime = field(default_factory=lambda: now())
    updated_at: datetime = field(default_factory=lambda: now())

    def __post_init__(self) -> None:
        if not self.qr_payload and self.unique_id:
            self.qr_payload = self.generate_qr_payload(self.unique_id)

    @staticmethod
    def generate_qr_payload(unique_id: str) -> str:
        """QR payload for a label, e.g. "TOOL#T1001"."""
        return f"{QR_PREFIX}{unique_id}"

    @property
    def is_available(self) -> bool:
        return self.status == ToolStatus.AVAILABLE

    @property
    def is_checked_out(self) -> bool:
        return self.status == ToolStatus.CHECKED_OUT

    @property
    def display_name(self) -> str:
        return f"{self.brand} {self.model} {self.name}".strip()

    @property
    def holder_id(self) -> Optional[str]:
        return ref_id(self.current_holder)

    def matches(self, query: str) -> bool:
        """Case-insensitive substring search used by list screens."""
        if not query:
            return True
        needle = query.lower()
        haystack = (
            self.name,
            self.brand,
            self.model,
            self.unique_id,
            self.num,
            self.display_name,
        )
        return any(needle in (value or "").lower() for value in haystack)

    def check_out(self, holder: Staff, assigned_by_name: Optional[str] = None) -> None:
        """Hand the tool to a staff member."""
        if not self.is_available:
            raise ValueError(f"Tool is already checked out: {self.unique_id}")
        timestamp = now()
        self.status = ToolStatus.CHECKED_OUT
        self.current_holder = staff_ref(holder.uid)
        self.last_assigned_to_name = holder.full_name
        self.last_assigned_to_job_code = holder.job_code
        self.last_assigned_by_name = assigned_by_name or holder.full_name
        self.last_assigned_at = timestamp
        self.updated_at = timestamp

    def check_in(self, checked_in_by_name: Optional[str] = None) -> None:
        """Return the tool to the store."""
        if self.is_available:
            raise ValueError(f"Tool is already available: {self.unique_id}")
        timestamp = now()
        self.status = ToolStatus.AVAILABLE
        self.current_holder = None
        self.last_checkin_at = timestamp
        self.last_checkin_by_name = checked_in_by_name
        self.updated_at = timestamp

    def __str__(self) -> str:
        return (
            f"Tool(id: {self.id}, uniqueId: {self.unique_id}, "
            f"name: {self.display_name}, status: {self.status})"
        )
