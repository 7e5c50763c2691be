"""
Create Staff Use Case
=====================

Business use case for registering a staff member.
"""
from typing import Optional

from toolroom.domain.exceptions import ConflictError
from toolroom.domain.models.staff import Staff, StaffRole
from toolroom.domain.repositories.staff_repository import StaffRepository


class CreateStaffUseCase:
    """
    Use case for creating a staff member.

    Email addresses and job codes identify people on the floor, so both
    must be unused.
    """

    def __init__(self, staff_repository: StaffRepository):
        """
        Initialize use case with repository.

        Args:
            staff_repository: Repository for staff persistence
        """
        self._repository = staff_repository

    def execute(
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
        Execute the create staff use case.

        Args:
            full_name: Display name
            email: Contact email (stored lower-cased)
            job_code: Badge/job code, e.g. "WRK001"
            role: Staff role
            uid: Optional document id (generated when omitted)
            team_id: Optional team membership
            photo_url: Optional avatar URL
            auth_uid: Optional linked authentication account id

        Returns:
            Created staff entity

        Raises:
            ValueError: If a required field is missing
            ConflictError: If the email, job code or uid is taken
        """
        if not full_name or not full_name.strip():
            raise ValueError("Full name is required")
        if not email or not email.strip():
            raise ValueError("Email is required")
        if "@" not in email:
            raise ValueError(f"Invalid email address: {email}")
        if not job_code or not job_code.strip():
            raise ValueError("Job code is required")

        email = email.strip().lower()
        job_code = job_code.strip()

        if self._repository.find_by_email(email):
            raise ConflictError(f"Staff member with email '{email}' already exists")
        if self._repository.find_by_job_code(job_code):
            raise ConflictError(f"Staff member with job code '{job_code}' already exists")

        staff = Staff(
            uid=(uid or "").strip(),
            full_name=full_name.strip(),
            job_code=job_code,
            email=email,
            role=role,
            team_id=team_id,
            photo_url=photo_url,
            auth_uid=auth_uid,
            has_auth_account=bool(auth_uid),
        )
        return self._repository.create(staff)
