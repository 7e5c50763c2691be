"""Tests for single and batch check-out / check-in."""
import pytest

from toolroom.domain.exceptions import ConflictError, NotFoundError
from toolroom.domain.models.tool_history import ToolAction
from toolroom.domain.references import staff_ref, tool_ref


class TestCheckOut:

    def test_writes_tool_staff_and_history(self, seeded, transaction_service, tool_repo, staff_repo, history_repo):
        result = transaction_service.check_out_tool(
            unique_id="T1001",
            staff_id="worker-001",
            performed_by="supervisor-001",
            supervisor_id="supervisor-001",
            notes="Site job",
            location="Workshop A",
        )

        tool = tool_repo.find_by_unique_id("T1001")
        assert tool.is_checked_out
        assert tool.current_holder == "staff/worker-001"
        assert tool.last_assigned_to_name == "Mike Worker"
        assert tool.last_assigned_by_name == "Sarah Supervisor"

        assert staff_repo.find_by_id("worker-001").assigned_tool_ids == ["T1002", "T1001"]

        entry = history_repo.find_by_id(result.entry.id)
        assert entry.action is ToolAction.CHECKOUT
        assert entry.tool_ref == tool_ref(tool.id)
        assert entry.by_ref == staff_ref("supervisor-001")
        assert entry.supervisor_ref == staff_ref("supervisor-001")
        assert entry.assigned_to_ref == staff_ref("worker-001")
        assert entry.notes == "Site job"
        assert entry.metadata == {"staffName": "Mike Worker", "toolName": "DeWalt DCD771C2 Cordless Drill"}

    def test_performer_defaults_to_receiver(self, seeded, transaction_service):
        result = transaction_service.check_out_tool("T1003", "worker-002")
        assert result.entry.by_ref == staff_ref("worker-002")
        assert result.tool.last_assigned_by_name == "Lisa Technician"

    def test_rejections(self, seeded, transaction_service, history_repo):
        with pytest.raises(ConflictError):
            transaction_service.check_out_tool("T1002", "worker-002")
        with pytest.raises(ConflictError):
            transaction_service.check_out_tool("T1001", "worker-003")  # inactive
        with pytest.raises(NotFoundError):
            transaction_service.check_out_tool("T9999", "worker-001")
        with pytest.raises(NotFoundError):
            transaction_service.check_out_tool("T1001", "ghost")
        with pytest.raises(ValueError):
            transaction_service.check_out_tool(" ", "worker-001")

        # Nothing was written
        assert history_repo.find() == []
        assert transaction_service.can_check_out("T1001")


class TestCheckIn:

    def test_attributed_to_previous_holder(self, seeded, transaction_service, tool_repo, staff_repo):
        result = transaction_service.check_in_tool("T1002", notes="Done")

        tool = tool_repo.find_by_unique_id("T1002")
        assert tool.is_available
        assert tool.current_holder is None
        assert tool.last_checkin_by_name == "Mike Worker"
        assert staff_repo.find_by_id("worker-001").assigned_tool_ids == []

        assert result.entry.action is ToolAction.CHECKIN
        assert result.entry.by_ref == staff_ref("worker-001")
        assert result.entry.assigned_to_ref == staff_ref("worker-001")
        assert result.entry.metadata["staffName"] == "Mike Worker"

    def test_attributed_to_performer(self, seeded, transaction_service):
        result = transaction_service.check_in_tool("T1004", performed_by="supervisor-001")
        assert result.entry.by_ref == staff_ref("supervisor-001")
        assert result.tool.last_checkin_by_name == "Sarah Supervisor"
        assert result.entry.metadata["staffName"] == "Lisa Technician"

    def test_rejects_available_tool(self, seeded, transaction_service):
        with pytest.raises(ConflictError):
            transaction_service.check_in_tool("T1001")
        assert not transaction_service.can_check_in("T1001")
        assert transaction_service.can_check_in("T1002")


class TestBatch:

    def test_batch_check_out_partial(self, seeded, transaction_service, tool_repo, staff_repo, history_service):
        outcome = transaction_service.batch_check_out(
            unique_ids=["T1001", "T1002", "T1003", "T9999", "T1001"],
            staff_id="worker-002",
            performed_by="supervisor-001",
            notes="Weekly maintenance",
        )

        assert outcome.succeeded == ["T1001", "T1003"]
        assert outcome.failed == {"T1002": "Tool is already checked out", "T9999": "Tool not found"}
        assert not outcome.all_succeeded

        batch = history_service.get_batch(outcome.batch.id)
        assert batch.tool_ids == ["T1001", "T1003"]
        assert batch.created_by == staff_ref("supervisor-001")
        assert batch.assigned_to_ref == staff_ref("worker-002")
        assert batch.metadata["toolCount"] == 2

        entries = history_service.get_batch_history(outcome.batch.id)
        assert len(entries) == 2
        assert all(e.batch_id == outcome.batch.id for e in entries)

        assert tool_repo.find_by_unique_id("T1003").holder_id == "worker-002"
        assert set(staff_repo.find_by_id("worker-002").assigned_tool_ids) == {"T1004", "T1001", "T1003"}

    def test_batch_with_no_valid_tools_writes_nothing(self, seeded, transaction_service, history_service):
        outcome = transaction_service.batch_check_out(["T1002", "T1004"], staff_id="worker-001")
        assert outcome.batch is None
        assert outcome.succeeded == []
        assert len(outcome.failed) == 2
        assert history_service.list_batches() == []

    def test_batch_requires_tools(self, seeded, transaction_service):
        with pytest.raises(ValueError):
            transaction_service.batch_check_out(["", " "], staff_id="worker-001")

    def test_batch_check_in(self, seeded, transaction_service, tool_repo, staff_repo):
        outcome = transaction_service.batch_check_in(["T1002", "T1004", "T1005"], performed_by="admin-001")

        assert outcome.action is ToolAction.CHECKIN
        assert outcome.succeeded == ["T1002", "T1004"]
        assert outcome.failed == {"T1005": "Tool is already available"}
        assert outcome.batch.created_by == staff_ref("admin-001")

        assert tool_repo.count("checked_out") == 0
        assert staff_repo.find_by_id("worker-001").assigned_tool_ids == []
        assert staff_repo.find_by_id("worker-002").assigned_tool_ids == []


def test_status_info(seeded, transaction_service):
    info = transaction_service.get_tool_status_info("T1004")
    assert info["is_checked_out"] and not info["is_available"]
    assert info["assigned_staff"].uid == "worker-002"

    assert transaction_service.get_tool_status_info("T1001")["assigned_staff"] is None
    assert transaction_service.get_tool_status_info("T9999") is None
    assert [t.unique_id for t in transaction_service.get_tools_assigned_to("worker-001")] == ["T1002"]
