"""Tests for StaffService."""
import pytest

from toolroom.domain.exceptions import ConflictError, NotFoundError
from toolroom.domain.models.staff import StaffRole


def test_create_staff_normalises_email(staff_service):
    staff = staff_service.create_staff(
        full_name="Nina Welder",
        email="  Nina@Versfeld.com ",
        job_code="WRK010",
        auth_uid="auth-123",
    )
    assert staff.uid
    assert staff.email == "nina@versfeld.com"
    assert staff.role is StaffRole.WORKER
    assert staff.has_auth_account is True
    assert staff_service.get_staff_by_email("NINA@versfeld.com").uid == staff.uid


def test_create_staff_validation(seeded, staff_service):
    with pytest.raises(ValueError):
        staff_service.create_staff(full_name="", email="a@b.com", job_code="X1")
    with pytest.raises(ValueError):
        staff_service.create_staff(full_name="A", email="not-an-email", job_code="X1")
    with pytest.raises(ConflictError):
        staff_service.create_staff(full_name="A", email="admin@versfeld.com", job_code="X1")
    with pytest.raises(ConflictError):
        staff_service.create_staff(full_name="A", email="a@b.com", job_code="WRK001")


def test_lookups(seeded, staff_service):
    assert staff_service.get_staff("worker-001").full_name == "Mike Worker"
    assert staff_service.get_staff("") is None
    assert staff_service.get_staff_by_job_code("SUP001").uid == "supervisor-001"
    assert staff_service.get_staff_by_auth_uid("") is None


def test_list_and_search(seeded, staff_service):
    assert len(staff_service.list_staff()) == 4
    assert len(staff_service.list_staff(include_inactive=True)) == 5
    assert {s.uid for s in staff_service.list_supervisors()} == {"admin-001", "supervisor-001"}

    assert [s.uid for s in staff_service.search_staff("wrk002")] == ["worker-002"]
    assert staff_service.search_staff("bob") == []
    assert [s.uid for s in staff_service.search_staff("bob", active_only=False)] == ["worker-003"]
    assert len(staff_service.search_staff("", role=StaffRole.WORKER)) == 2


def test_activation_and_role(seeded, staff_service):
    assert staff_service.deactivate_staff("worker-001").is_active is False
    assert staff_service.get_staff("worker-001").is_active is False
    assert staff_service.reactivate_staff("worker-003").is_active is True

    staff_service.change_role("worker-002", StaffRole.SUPERVISOR)
    assert staff_service.get_staff("worker-002").role is StaffRole.SUPERVISOR

    with pytest.raises(NotFoundError):
        staff_service.deactivate_staff("ghost")


def test_team_assignment(seeded, staff_service, team_repo):
    assert staff_service.assign_to_team("admin-001", "team-beta").team_id == "team-beta"
    assert team_repo.find_by_id("team-beta").members == ["worker-002", "admin-001"]

    assert staff_service.remove_from_team("admin-001").team_id is None
    assert team_repo.find_by_id("team-beta").members == ["worker-002"]
    # Already teamless
    assert staff_service.remove_from_team("admin-001").team_id is None

    with pytest.raises(NotFoundError):
        staff_service.assign_to_team("admin-001", "team-gamma")
    with pytest.raises(NotFoundError):
        staff_service.assign_to_team("ghost", "team-beta")


def test_team_assignment_moves_member_between_teams(seeded, staff_service, team_repo, staff_repo):
    staff_service.assign_to_team("worker-001", "team-beta")

    assert "worker-001" in team_repo.find_by_id("team-beta").members
    assert "worker-001" not in team_repo.find_by_id("team-alpha").members
    # Tool assignments are left alone
    assert staff_repo.find_by_id("worker-001").assigned_tool_ids == ["T1002"]


def test_remove_from_deleted_team_clears_team_id(seeded, staff_service, team_repo):
    team_repo.delete_all()
    assert staff_service.remove_from_team("worker-001").team_id is None


def test_create_staff_into_team(seeded, staff_service, team_repo):
    staff = staff_service.create_staff(
        full_name="Omar Fitter", email="omar@versfeld.com", job_code="WRK020", team_id="team-beta"
    )
    assert staff.team_id == "team-beta"
    assert staff.uid in team_repo.find_by_id("team-beta").members

    with pytest.raises(NotFoundError):
        staff_service.create_staff(
            full_name="Pia Fitter", email="pia@versfeld.com", job_code="WRK021", team_id="team-gamma"
        )
    assert staff_service.get_staff_by_email("pia@versfeld.com") is None


def test_auth_account_linking(seeded, staff_service):
    assert {s.uid for s in staff_service.get_staff_without_auth()} == {
        "admin-001", "supervisor-001", "worker-001", "worker-002",
    }

    linked = staff_service.link_auth_account("worker-001", "auth-1")
    assert linked.has_auth_account and linked.auth_uid == "auth-1"
    assert staff_service.get_staff_by_auth_uid("auth-1").uid == "worker-001"

    with pytest.raises(ConflictError):
        staff_service.link_auth_account("worker-002", "auth-1")
    with pytest.raises(ValueError):
        staff_service.link_auth_account("worker-002", " ")


def test_last_sign_in(seeded, staff_service):
    assert staff_service.get_staff("worker-001").last_sign_in is None
    staff_service.update_last_sign_in("worker-001")
    assert staff_service.get_staff("worker-001").last_sign_in is not None


def test_counts(seeded, staff_service):
    assert staff_service.get_counts() == {
        "total": 5,
        "active": 4,
        "admin": 1,
        "supervisor": 1,
        "worker": 3,
    }
