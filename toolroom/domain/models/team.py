"""
Team Model
==========

Teams group workers under a supervisor.
"""
from datetime import datetime
from typing import List
from dataclasses import dataclass, field

from toolroom.utils.datetime_utils import now


@dataclass
class Team:
    id: str
    name: str
    description: str = ""
    leader: str = ""  # staff uid
    members: List[str] = field(default_factory=list)
    is_active: bool = True
    created_at: datetime = field(default_factory=lambda: now())

    @property
    def member_count(self) -> int:
        return len(self.members)

    def add_member(self, staff_uid: str) -> bool:
        """Add a member; returns False if already present."""
        if staff_uid in self.members:
            return False
        self.members.append(staff_uid)
        return True

    def remove_member(self, staff_uid: str) -> bool:
        """Remove a member; returns False if not present."""
        if staff_uid not in self.members:
            return False
        self.members.remove(staff_uid)
        return True
