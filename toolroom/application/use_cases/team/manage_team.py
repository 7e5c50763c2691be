"""
Team Use Cases
==============

Creating teams and moving staff in and out of them. A member's team is
recorded both on the team document and on the staff document's teamId.
"""
import logging
from typing import Callable, Optional

from toolroom.domain.exceptions import ConflictError, NotFoundError
from toolroom.domain.models.team import Team
from toolroom.domain.repositories.staff_repository import StaffRepository
from toolroom.domain.repositories.team_repository import TeamRepository
from toolroom.domain.repositories.write_batch import WriteBatch

logger = logging.getLogger(__name__)


class CreateTeamUseCase:
    """Use case for creating a team."""

    def __init__(self, team_repository: TeamRepository, staff_repository: StaffRepository):
        self._teams = team_repository
        self._staff = staff_repository

    def execute(
        self,
        team_id: str,
        name: str,
        description: str = "",
        leader: Optional[str] = None,
    ) -> Team:
        """
        Raises:
            ValueError: If the id or name is missing
            ConflictError: If the team id is taken
            NotFoundError: If the leader does not exist
        """
        if not team_id or not team_id.strip():
            raise ValueError("Team ID is required")
        if not name or not name.strip():
            raise ValueError("Team name is required")

        team_id = team_id.strip()
        if self._teams.exists(team_id):
            raise ConflictError(f"Team '{team_id}' already exists")
        if leader and not self._staff.exists(leader):
            raise NotFoundError(f"Staff member not found: {leader}")

        team = Team(
            id=team_id,
            name=name.strip(),
            description=(description or "").strip(),
            leader=leader or "",
        )
        return self._teams.save(team)


class ChangeTeamMembershipUseCase:
    """
    Use case for adding or removing a team member.

    The team and staff documents are committed in one write batch.
    """

    def __init__(
        self,
        team_repository: TeamRepository,
        staff_repository: StaffRepository,
        batch_factory: Callable[[], WriteBatch],
    ):
        self._teams = team_repository
        self._staff = staff_repository
        self._new_batch = batch_factory

    def execute(self, team_id: str, staff_id: str, add: bool = True) -> Team:
        """
        Args:
            team_id: Team to change
            staff_id: Staff member to add or remove
            add: True to add, False to remove

        Returns:
            Updated team entity

        Raises:
            NotFoundError: If the team or staff member does not exist
        """
        team = self._teams.find_by_id(team_id)
        if not team:
            raise NotFoundError(f"Team '{team_id}' not found")
        staff = self._staff.find_by_id(staff_id)
        if not staff:
            raise NotFoundError(f"Staff member not found: {staff_id}")

        batch = self._new_batch()
        if add:
            previous_team_id = staff.team_id
            if previous_team_id and previous_team_id != team.id:
                previous = self._teams.find_by_id(previous_team_id)
                if previous and previous.remove_member(staff.uid):
                    self._teams.stage_member(batch, previous.id, staff.uid, member=False)
            team.add_member(staff.uid)
            staff.assign_to_team(team.id)
            self._teams.stage_member(batch, team.id, staff.uid, member=True)
            self._staff.stage_team(batch, staff.uid, team.id)
        else:
            team.remove_member(staff.uid)
            self._teams.stage_member(batch, team.id, staff.uid, member=False)
            if staff.team_id == team.id:
                staff.remove_from_team()
                self._staff.stage_team(batch, staff.uid, None)
        batch.commit()

        logger.info(
            "Staff %s %s team %s", staff.uid, "added to" if add else "removed from", team.id
        )
        return team
