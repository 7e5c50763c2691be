"""
Staff Repository Interface
==========================

Abstract interface for staff data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from toolroom.domain.models.staff import Staff, StaffRole
from toolroom.domain.repositories.write_batch import WriteBatch


class StaffRepository(ABC):
    """
    Abstract repository for staff persistence operations.
    """

    @abstractmethod
    def new_id(self) -> str:
        """Generate a fresh staff uid."""
        pass

    @abstractmethod
    def create(self, staff: Staff) -> Staff:
        """
        Create a staff member under `staff.uid`.

        Raises:
            ConflictError: If the uid is already taken
        """
        pass

    @abstractmethod
    def update(self, staff: Staff) -> Staff:
        """
        Update an existing staff member.

        Raises:
            NotFoundError: If the staff member does not exist
        """
        pass

    @abstractmethod
    def find_by_id(self, uid: str) -> Optional[Staff]:
        pass

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[Staff]:
        pass

    @abstractmethod
    def find_by_job_code(self, job_code: str) -> Optional[Staff]:
        pass

    @abstractmethod
    def find_by_auth_uid(self, auth_uid: str) -> Optional[Staff]:
        pass

    @abstractmethod
    def find_all(
        self,
        include_inactive: bool = False,
        role: Optional[StaffRole] = None,
        team_id: Optional[str] = None,
    ) -> List[Staff]:
        """
        List staff ordered by full name.

        Args:
            include_inactive: Include deactivated members
            role: Optional role filter
            team_id: Optional team filter
        """
        pass

    @abstractmethod
    def count(self, active_only: bool = False, role: Optional[StaffRole] = None) -> int:
        pass

    @abstractmethod
    def exists(self, uid: str) -> bool:
        pass

    @abstractmethod
    def delete_all(self) -> int:
        """Delete every staff record. Returns the number removed."""
        pass

    @abstractmethod
    def stage_assigned_tool(
        self,
        batch: WriteBatch,
        uid: str,
        tool_unique_id: str,
        assigned: bool,
    ) -> None:
        """
        Stage adding (assigned=True) or removing a tool from the member's
        assigned tool list.
        """
        pass

    @abstractmethod
    def stage_team(self, batch: WriteBatch, uid: str, team_id: Optional[str]) -> None:
        """Stage setting (or clearing, with None) the member's team id."""
        pass
