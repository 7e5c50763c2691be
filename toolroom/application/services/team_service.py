"""
Team Service
============
"""
from typing import Callable, List, Optional

from toolroom.application.use_cases.team.manage_team import (
    ChangeTeamMembershipUseCase,
    CreateTeamUseCase,
)
from toolroom.domain.models.staff import Staff
from toolroom.domain.models.team import Team
from toolroom.domain.repositories.staff_repository import StaffRepository
from toolroom.domain.repositories.team_repository import TeamRepository
from toolroom.domain.repositories.write_batch import WriteBatch


class TeamService:
    """Application service for teams and their membership."""

    def __init__(
        self,
        team_repository: TeamRepository,
        staff_repository: StaffRepository,
        batch_factory: Callable[[], WriteBatch],
    ):
        self._repository = team_repository
        self._staff = staff_repository
        self._create_use_case = CreateTeamUseCase(team_repository, staff_repository)
        self._membership_use_case = ChangeTeamMembershipUseCase(
            team_repository, staff_repository, batch_factory
        )

    def create_team(
        self,
        team_id: str,
        name: str,
        description: str = "",
        leader: Optional[str] = None,
    ) -> Team:
        return self._create_use_case.execute(
            team_id=team_id, name=name, description=description, leader=leader
        )

    def get_team(self, team_id: str) -> Optional[Team]:
        return self._repository.find_by_id(team_id)

    def list_teams(self, active_only: bool = False) -> List[Team]:
        return self._repository.find_all(active_only=active_only)

    def get_members(self, team_id: str) -> List[Staff]:
        """Active staff whose teamId points at the team."""
        return self._staff.find_all(team_id=team_id)

    def add_member(self, team_id: str, staff_id: str) -> Team:
        return self._membership_use_case.execute(team_id, staff_id, add=True)

    def remove_member(self, team_id: str, staff_id: str) -> Team:
        return self._membership_use_case.execute(team_id, staff_id, add=False)
