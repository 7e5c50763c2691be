"""
Tool History Models
===================

History entries record every check-out and check-in. Batch operations
group several entries under one ToolBatch record.
"""
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field

from toolroom.domain.references import ref_id
from toolroom.utils.datetime_utils import format_relative, now


class ToolAction(str, Enum):
    """Tool action types"""
    CHECKOUT = "checkout"
    CHECKIN = "checkin"

    @classmethod
    def from_string(cls, action: Optional[str]) -> "ToolAction":
        """Parse a stored action; unknown values read as a checkout."""
        try:
            return cls((action or "").strip().lower())
        except ValueError:
            return cls.CHECKOUT

    @property
    def display_name(self) -> str:
        return "Check Out" if self is ToolAction.CHECKOUT else "Check In"


@dataclass
class ToolHistory:
    """A single check-out or check-in."""
    id: str
    tool_ref: str
    action: ToolAction
    by_ref: str
    supervisor_ref: Optional[str] = None
    assigned_to_ref: Optional[str] = None
    timestamp: datetime = field(default_factory=lambda: now())
    notes: Optional[str] = None
    location: Optional[str] = None
    batch_id: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def tool_id(self) -> Optional[str]:
        return ref_id(self.tool_ref)

    @property
    def by_id(self) -> Optional[str]:
        return ref_id(self.by_ref)

    @property
    def supervisor_id(self) -> Optional[str]:
        return ref_id(self.supervisor_ref)

    @property
    def assigned_to_id(self) -> Optional[str]:
        return ref_id(self.assigned_to_ref)

    @property
    def is_checkout(self) -> bool:
        return self.action is ToolAction.CHECKOUT

    @property
    def is_checkin(self) -> bool:
        return self.action is ToolAction.CHECKIN

    @property
    def is_batch_action(self) -> bool:
        return bool(self.batch_id)

    def formatted_timestamp(self, reference: Optional[datetime] = None) -> str:
        return format_relative(self.timestamp, reference)


@dataclass
class ToolBatch:
    """A group of tools checked out or in together."""
    id: str
    created_by: str
    tool_ids: List[str]
    action: ToolAction
    created_at: datetime = field(default_factory=lambda: now())
    assigned_to_ref: Optional[str] = None
    notes: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def tool_count(self) -> int:
        return len(self.tool_ids)

    @property
    def assigned_to_id(self) -> Optional[str]:
        return ref_id(self.assigned_to_ref)
