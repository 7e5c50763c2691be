"""Tests for HistoryService queries and statistics."""
from datetime import timedelta

from toolroom.domain.models.tool_history import ToolAction
from toolroom.scripts.data_seeder import DataSeeder
from toolroom.utils.datetime_utils import now


def _run_activity(transaction_service):
    transaction_service.check_out_tool("T1001", "worker-001", performed_by="supervisor-001")
    transaction_service.check_out_tool("T1003", "worker-002", performed_by="supervisor-001")
    transaction_service.check_in_tool("T1002", performed_by="worker-001")
    transaction_service.check_in_tool("T1001")


def test_tool_and_staff_history(seeded, transaction_service, history_service, tool_repo):
    _run_activity(transaction_service)
    drill = tool_repo.find_by_unique_id("T1001")

    tool_history = history_service.get_tool_history(drill.id)
    assert sorted(e.action.value for e in tool_history) == ["checkin", "checkout"]

    # Performer or receiver
    assert len(history_service.get_staff_history("worker-001")) == 3
    assert len(history_service.get_staff_history("supervisor-001")) == 2
    assert len(history_service.get_recent_activity(limit=2)) == 2


def test_filtered_history(seeded, transaction_service, history_service):
    _run_activity(transaction_service)

    assert len(history_service.get_history()) == 4
    assert len(history_service.get_history(action=ToolAction.CHECKIN)) == 2
    assert len(history_service.get_history(limit=1, offset=3)) == 1

    assert history_service.get_history(end=now() - timedelta(days=1)) == []


def test_statistics(seeded, transaction_service, history_service):
    _run_activity(transaction_service)

    assert history_service.get_action_statistics() == {"checkout": 2, "checkin": 2}
    assert history_service.get_action_statistics(staff_id="supervisor-001") == {"checkout": 2, "checkin": 0}

    # Ties rank by staff id
    assert history_service.get_most_active_staff(limit=2) == [
        {"staffId": "supervisor-001", "activityCount": 2},
        {"staffId": "worker-001", "activityCount": 2},
    ]
    assert history_service.get_most_active_staff(limit=1) == [
        {"staffId": "supervisor-001", "activityCount": 2},
    ]
    assert history_service.get_most_active_staff(end=now() - timedelta(days=1)) == []

    assert history_service.get_activity_count() == 4
    assert history_service.get_activity_count(staff_id="worker-001") == 2
    assert history_service.get_daily_activity_count() == 4


def test_notes_and_delete(seeded, transaction_service, history_service):
    entry = transaction_service.check_out_tool("T1001", "worker-001").entry

    assert history_service.update_notes(entry.id, "Scratched casing") is True
    assert history_service.get_entry(entry.id).notes == "Scratched casing"

    assert history_service.delete_entry(entry.id) is True
    assert history_service.get_entry(entry.id) is None
    assert history_service.delete_entry(entry.id) is False


def test_seeded_sample_history(seeded, history_service):
    seeder = DataSeeder(seeded)
    assert seeder.seed_sample_history() == 3
    seeder.seed_sample_batch()

    assert history_service.get_batch("batch-001").tool_ids == ["T1001", "T1003", "T1005"]
    assert len(history_service.get_batch_history("batch-001")) == 1
    assert history_service.get_activity_count(start=now() - timedelta(hours=5)) == 2
