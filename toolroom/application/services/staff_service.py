"""
Staff Service
=============

Application service for staff records and role management.
"""
import logging
from typing import Callable, Dict, List, Optional

from toolroom.application.use_cases.staff.create_staff import CreateStaffUseCase
from toolroom.application.use_cases.team.manage_team import ChangeTeamMembershipUseCase
from toolroom.domain.exceptions import ConflictError, NotFoundError
from toolroom.domain.models.staff import Staff, StaffRole
from toolroom.domain.repositories.staff_repository import StaffRepository
from toolroom.domain.repositories.team_repository import TeamRepository
from toolroom.domain.repositories.write_batch import WriteBatch
from toolroom.utils.datetime_utils import now

logger = logging.getLogger(__name__)


class StaffService:
    """
    Application service for staff operations.

    Plain lookups return None when nothing matches; state changes raise
    NotFoundError for unknown members.
    """

    def __init__(
        self,
        staff_repository: StaffRepository,
        team_repository: TeamRepository,
        batch_factory: Callable[[], WriteBatch],
    ):
        """
        Initialize service with repositories.

        Args:
            staff_repository: Repository for staff persistence
            team_repository: Repository for the teams members belong to
            batch_factory: Creates the write batch for membership changes
        """
        self._repository = staff_repository
        self._teams = team_repository
        self._create_use_case = CreateStaffUseCase(staff_repository)
        self._membership_use_case = ChangeTeamMembershipUseCase(
            team_repository, staff_repository, batch_factory
        )

    def _require(self, uid: str) -> Staff:
        staff = self._repository.find_by_id(uid)
        if not staff:
            raise NotFoundError(f"Staff member not found: {uid}")
        return staff

    def create_staff(
        self,
        full_name: str,
        email: str,
        job_code: str,
        role: StaffRole = StaffRole.WORKER,
        uid: Optional[str] = None,
        team_id: Optional[str] = None,
        photo_url: Optional[str] = None,
        auth_uid: Optional[str] = None,
    ) -> Staff:
        """
        Register a staff member, optionally straight into a team.

        Returns:
            Created staff entity

        Raises:
            NotFoundError: If the team does not exist
        """
        if team_id and not self._teams.exists(team_id):
            raise NotFoundError(f"Team '{team_id}' not found")
        staff = self._create_use_case.execute(
            full_name=full_name,
            email=email,
            job_code=job_code,
            role=role,
            uid=uid,
            photo_url=photo_url,
            auth_uid=auth_uid,
        )
        if team_id:
            return self.assign_to_team(staff.uid, team_id)
        return staff

    def get_staff(self, uid: str) -> Optional[Staff]:
        if not uid:
            return None
        return self._repository.find_by_id(uid)

    def get_staff_by_email(self, email: str) -> Optional[Staff]:
        if not email:
            return None
        return self._repository.find_by_email(email)

    def get_staff_by_job_code(self, job_code: str) -> Optional[Staff]:
        if not job_code:
            return None
        return self._repository.find_by_job_code(job_code)

    def get_staff_by_auth_uid(self, auth_uid: str) -> Optional[Staff]:
        if not auth_uid:
            return None
        return self._repository.find_by_auth_uid(auth_uid)

    def list_staff(
        self,
        include_inactive: bool = False,
        role: Optional[StaffRole] = None,
        team_id: Optional[str] = None,
    ) -> List[Staff]:
        """List staff ordered by name."""
        return self._repository.find_all(
            include_inactive=include_inactive, role=role, team_id=team_id
        )

    def list_supervisors(self) -> List[Staff]:
        """Active staff who may authorise check-outs (supervisors and admins)."""
        return [staff for staff in self._repository.find_all() if staff.role.is_supervisor]

    def search_staff(
        self,
        query: str,
        role: Optional[StaffRole] = None,
        active_only: bool = True,
    ) -> List[Staff]:
        """Case-insensitive search over name, email and job code."""
        needle = (query or "").strip().lower()
        candidates = self._repository.find_all(include_inactive=not active_only, role=role)
        if not needle:
            return candidates
        return [
            staff
            for staff in candidates
            if needle in staff.full_name.lower()
            or needle in staff.email.lower()
            or needle in staff.job_code.lower()
        ]

    def deactivate_staff(self, uid: str) -> Staff:
        staff = self._require(uid)
        staff.deactivate()
        logger.info("Staff deactivated: %s", uid)
        return self._repository.update(staff)

    def reactivate_staff(self, uid: str) -> Staff:
        staff = self._require(uid)
        staff.activate()
        logger.info("Staff reactivated: %s", uid)
        return self._repository.update(staff)

    def change_role(self, uid: str, role: StaffRole) -> Staff:
        staff = self._require(uid)
        staff.change_role(role)
        logger.info("Staff %s role changed to %s", uid, role.value)
        return self._repository.update(staff)

    def assign_to_team(self, uid: str, team_id: str) -> Staff:
        """
        Move a member into a team.

        The team's members and the staff teamId change together; the member
        leaves any previous team.

        Raises:
            NotFoundError: If the staff member or the team does not exist
        """
        self._membership_use_case.execute(team_id, uid, add=True)
        return self._require(uid)

    def remove_from_team(self, uid: str) -> Staff:
        staff = self._require(uid)
        if not staff.team_id:
            return staff
        if self._teams.exists(staff.team_id):
            self._membership_use_case.execute(staff.team_id, uid, add=False)
            return self._require(uid)
        # Team document is gone; only the dangling id remains
        staff.remove_from_team()
        return self._repository.update(staff)

    def update_last_sign_in(self, uid: str) -> Staff:
        staff = self._require(uid)
        staff.last_sign_in = now()
        return self._repository.update(staff)

    def link_auth_account(self, uid: str, auth_uid: str) -> Staff:
        """
        Attach an authentication account to a staff record.

        Raises:
            ConflictError: If the account is already linked to someone else
        """
        if not auth_uid or not auth_uid.strip():
            raise ValueError("Auth UID is required")
        staff = self._require(uid)
        linked = self._repository.find_by_auth_uid(auth_uid)
        if linked and linked.uid != staff.uid:
            raise ConflictError(f"Auth account already linked to {linked.full_name}")
        staff.auth_uid = auth_uid.strip()
        staff.has_auth_account = True
        return self._repository.update(staff)

    def get_staff_without_auth(self) -> List[Staff]:
        """Active staff that have no linked authentication account."""
        return [staff for staff in self._repository.find_all() if not staff.has_auth_account]

    def get_counts(self) -> Dict[str, int]:
        counts = {
            "total": self._repository.count(),
            "active": self._repository.count(active_only=True),
        }
        for role in StaffRole:
            counts[role.value] = self._repository.count(role=role)
        return counts
