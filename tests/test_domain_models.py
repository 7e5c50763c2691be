"""Tests for the pure domain objects: roles, tools, history, teams and references."""
from datetime import datetime, timedelta, timezone

import pytest

from toolroom.core.config import reset_settings
from toolroom.domain.models.staff import (
    AUTHORIZE_CHECKOUTS,
    MANAGE_STAFF,
    MANAGE_TOOLS,
    VIEW_AUDIT_LOGS,
    Staff,
    StaffRole,
)
from toolroom.domain.models.team import Team
from toolroom.domain.models.tool import Tool, ToolStatus
from toolroom.domain.models.tool_history import ToolAction, ToolBatch, ToolHistory
from toolroom.domain.references import make_ref, ref_id, staff_ref, tool_ref
from toolroom.infrastructure.db.mongo_connection import to_mongo_datetime
from toolroom.utils.datetime_utils import as_aware, format_relative, parse_iso, to_iso, to_utc


def _staff(role=StaffRole.WORKER, **kwargs):
    defaults = dict(uid="worker-001", full_name="Mike Worker", job_code="WRK001", email="m@x.com")
    defaults.update(kwargs)
    return Staff(role=role, **defaults)


def _tool(**kwargs):
    defaults = dict(id="t1", unique_id="T1001", name="Cordless Drill", brand="DeWalt", model="DCD771C2")
    defaults.update(kwargs)
    return Tool(**defaults)


@pytest.mark.parametrize(
    "role, expected",
    [
        (StaffRole.ADMIN, {MANAGE_TOOLS, MANAGE_STAFF, AUTHORIZE_CHECKOUTS, VIEW_AUDIT_LOGS}),
        (StaffRole.SUPERVISOR, {AUTHORIZE_CHECKOUTS, VIEW_AUDIT_LOGS}),
        (StaffRole.WORKER, set()),
    ],
)
def test_role_permissions(role, expected):
    staff = _staff(role=role)
    actions = {MANAGE_TOOLS, MANAGE_STAFF, AUTHORIZE_CHECKOUTS, VIEW_AUDIT_LOGS}
    assert {action for action in actions if staff.can_perform_action(action)} == expected
    assert staff.can_perform_action("launch_rockets") is False


def test_role_from_string_defaults_to_worker():
    assert StaffRole.from_string("Supervisor") is StaffRole.SUPERVISOR
    assert StaffRole.from_string("janitor") is StaffRole.WORKER
    assert StaffRole.from_string(None) is StaffRole.WORKER


def test_staff_initials_and_labels():
    assert _staff(full_name="John Administrator").initials == "JA"
    assert _staff(full_name="Cher").initials == "C"
    assert _staff(full_name="").initials == "U"
    assert _staff().display_name_with_job == "Mike Worker (WRK001)"
    assert _staff(role=StaffRole.ADMIN).role_display_name == "Administrator"


def test_tool_qr_payload_and_display_name():
    tool = _tool()
    assert tool.qr_payload == "TOOL#T1001"
    assert tool.display_name == "DeWalt DCD771C2 Cordless Drill"
    assert tool.is_available and not tool.is_checked_out


def test_tool_check_out_and_in():
    tool = _tool()
    holder = _staff()

    tool.check_out(holder, assigned_by_name="Sarah Supervisor")
    assert tool.status == ToolStatus.CHECKED_OUT
    assert tool.current_holder == "staff/worker-001"
    assert tool.holder_id == "worker-001"
    assert tool.last_assigned_to_name == "Mike Worker"
    assert tool.last_assigned_to_job_code == "WRK001"
    assert tool.last_assigned_by_name == "Sarah Supervisor"

    with pytest.raises(ValueError):
        tool.check_out(holder)

    tool.check_in(checked_in_by_name="Mike Worker")
    assert tool.is_available
    assert tool.current_holder is None
    assert tool.last_checkin_by_name == "Mike Worker"
    # Last assignment survives the check-in
    assert tool.last_assigned_to_name == "Mike Worker"

    with pytest.raises(ValueError):
        tool.check_in()


def test_tool_matches_is_case_insensitive():
    tool = _tool(num="001")
    assert tool.matches("dewalt")
    assert tool.matches("t1001")
    assert tool.matches("")
    assert not tool.matches("makita")


def test_history_entry_ids_come_from_refs():
    entry = ToolHistory(
        id="h1",
        tool_ref="tools/t1",
        action=ToolAction.CHECKOUT,
        by_ref="staff/supervisor-001",
        assigned_to_ref="staff/worker-001",
        batch_id="b1",
    )
    assert entry.tool_id == "t1"
    assert entry.by_id == "supervisor-001"
    assert entry.assigned_to_id == "worker-001"
    assert entry.supervisor_id is None
    assert entry.is_checkout and entry.is_batch_action


def test_tool_action_parsing():
    assert ToolAction.from_string("CHECKIN") is ToolAction.CHECKIN
    assert ToolAction.from_string("unknown") is ToolAction.CHECKOUT
    assert ToolAction.CHECKIN.display_name == "Check In"


def test_batch_tool_count():
    batch = ToolBatch(id="b1", created_by="staff/admin-001", tool_ids=["T1", "T2"], action=ToolAction.CHECKIN)
    assert batch.tool_count == 2


def test_team_membership():
    team = Team(id="team-alpha", name="Alpha Team")
    assert team.add_member("worker-001") is True
    assert team.add_member("worker-001") is False
    assert team.member_count == 1
    assert team.remove_member("worker-001") is True
    assert team.remove_member("worker-001") is False


def test_references():
    assert make_ref("teams", "team-alpha") == "teams/team-alpha"
    assert staff_ref("worker-001") == "staff/worker-001"
    assert tool_ref("abc") == "tools/abc"
    assert ref_id("staff/worker-001") == "worker-001"
    assert ref_id("worker-001") == "worker-001"
    assert ref_id(None) is None
    with pytest.raises(ValueError):
        make_ref("staff", "")


def test_format_relative():
    reference = datetime(2024, 5, 20, 12, 0, tzinfo=timezone.utc)
    assert format_relative(reference - timedelta(seconds=30), reference) == "Just now"
    assert format_relative(reference - timedelta(minutes=5), reference) == "5m ago"
    assert format_relative(reference - timedelta(hours=3), reference) == "3h ago"
    assert format_relative(reference - timedelta(days=2), reference) == "2d ago"
    assert format_relative(reference - timedelta(days=10), reference) == "10/5/2024"


def test_iso_helpers():
    dt = parse_iso("2025-10-24T10:30:00Z")
    assert dt == datetime(2025, 10, 24, 10, 30, tzinfo=timezone.utc)
    assert to_iso(dt) == "2025-10-24T10:30:00Z"
    assert parse_iso("not a date") is None
    assert parse_iso(None) is None


def test_naive_datetimes_are_application_time(monkeypatch):
    monkeypatch.setenv("TIMEZONE", "Africa/Johannesburg")
    reset_settings()

    naive = datetime(2025, 10, 24, 12, 0)
    stored = datetime(2025, 10, 24, 10, 0)
    # Parsing, conversion and storage agree on the UTC+2 offset
    assert to_mongo_datetime(naive) == stored
    assert to_mongo_datetime(parse_iso("2025-10-24T12:00:00")) == stored
    assert to_utc(naive) == datetime(2025, 10, 24, 10, 0, tzinfo=timezone.utc)
    assert to_mongo_datetime(stored.replace(tzinfo=timezone.utc)) == stored
    assert as_aware(stored) == parse_iso("2025-10-24T12:00:00")
