"""
Team Repository Interface
=========================
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from toolroom.domain.models.team import Team
from toolroom.domain.repositories.write_batch import WriteBatch


class TeamRepository(ABC):
    """Abstract repository for team persistence operations."""

    @abstractmethod
    def save(self, team: Team) -> Team:
        """Create or replace a team."""
        pass

    @abstractmethod
    def find_by_id(self, team_id: str) -> Optional[Team]:
        pass

    @abstractmethod
    def find_all(self, active_only: bool = False) -> List[Team]:
        """List teams ordered by name."""
        pass

    @abstractmethod
    def exists(self, team_id: str) -> bool:
        pass

    @abstractmethod
    def delete_all(self) -> int:
        pass

    @abstractmethod
    def stage_member(self, batch: WriteBatch, team_id: str, staff_uid: str, member: bool) -> None:
        """Stage adding (member=True) or removing one uid from the team's members."""
        pass
