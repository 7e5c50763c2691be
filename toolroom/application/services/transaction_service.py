"""
Tool Transaction Service
========================

Application service for checking tools out and in, singly or in batches.
"""
from typing import Any, Callable, Dict, Iterable, List, Optional

from toolroom.application.use_cases.transaction.base import BatchOutcome, TransactionResult
from toolroom.application.use_cases.transaction.batch_transaction import (
    BatchCheckInUseCase,
    BatchCheckOutUseCase,
)
from toolroom.application.use_cases.transaction.check_in_tool import CheckInToolUseCase
from toolroom.application.use_cases.transaction.check_out_tool import CheckOutToolUseCase
from toolroom.domain.models.tool import Tool
from toolroom.domain.repositories.history_repository import BatchRepository, HistoryRepository
from toolroom.domain.repositories.staff_repository import StaffRepository
from toolroom.domain.repositories.tool_repository import ToolRepository
from toolroom.domain.repositories.write_batch import WriteBatch


class ToolTransactionService:
    """
    Application service for tool transactions.

    Every check-out or check-in updates the tool, the holder's assigned
    tool list and the history in one write batch.
    """

    def __init__(
        self,
        tool_repository: ToolRepository,
        staff_repository: StaffRepository,
        history_repository: HistoryRepository,
        batch_repository: BatchRepository,
        batch_factory: Callable[[], WriteBatch],
    ):
        """
        Initialize service with repositories.

        Args:
            tool_repository: Repository for tools
            staff_repository: Repository for staff
            history_repository: Repository for history entries
            batch_repository: Repository for batch records
            batch_factory: Returns a fresh WriteBatch for each commit
        """
        self._tools = tool_repository
        self._staff = staff_repository
        repositories = (
            tool_repository,
            staff_repository,
            history_repository,
            batch_repository,
            batch_factory,
        )
        self._check_out_use_case = CheckOutToolUseCase(*repositories)
        self._check_in_use_case = CheckInToolUseCase(*repositories)
        self._batch_check_out_use_case = BatchCheckOutUseCase(*repositories)
        self._batch_check_in_use_case = BatchCheckInUseCase(*repositories)

    def check_out_tool(
        self,
        unique_id: str,
        staff_id: str,
        performed_by: Optional[str] = None,
        supervisor_id: Optional[str] = None,
        notes: Optional[str] = None,
        location: Optional[str] = None,
    ) -> TransactionResult:
        """
        Check a tool out to a staff member.

        Args:
            unique_id: Label code of the tool
            staff_id: Staff member receiving the tool
            performed_by: Staff member recording the check-out
            supervisor_id: Optional authorising supervisor
            notes: Optional free text
            location: Optional site/location

        Returns:
            TransactionResult with the updated tool and its history entry
        """
        return self._check_out_use_case.execute(
            unique_id=unique_id,
            staff_id=staff_id,
            performed_by=performed_by,
            supervisor_id=supervisor_id,
            notes=notes,
            location=location,
        )

    def check_in_tool(
        self,
        unique_id: str,
        performed_by: Optional[str] = None,
        notes: Optional[str] = None,
        location: Optional[str] = None,
    ) -> TransactionResult:
        """Check a tool back in."""
        return self._check_in_use_case.execute(
            unique_id=unique_id,
            performed_by=performed_by,
            notes=notes,
            location=location,
        )

    def batch_check_out(
        self,
        unique_ids: Iterable[str],
        staff_id: str,
        performed_by: Optional[str] = None,
        supervisor_id: Optional[str] = None,
        notes: Optional[str] = None,
        location: Optional[str] = None,
    ) -> BatchOutcome:
        """
        Check several tools out to one staff member.

        Returns:
            BatchOutcome listing the tools written and the ones skipped
        """
        return self._batch_check_out_use_case.execute(
            unique_ids=unique_ids,
            staff_id=staff_id,
            performed_by=performed_by,
            supervisor_id=supervisor_id,
            notes=notes,
            location=location,
        )

    def batch_check_in(
        self,
        unique_ids: Iterable[str],
        performed_by: Optional[str] = None,
        notes: Optional[str] = None,
        location: Optional[str] = None,
    ) -> BatchOutcome:
        """Check several tools back in."""
        return self._batch_check_in_use_case.execute(
            unique_ids=unique_ids,
            performed_by=performed_by,
            notes=notes,
            location=location,
        )

    def can_check_out(self, unique_id: str) -> bool:
        tool = self._tools.find_by_unique_id(unique_id)
        return tool is not None and tool.is_available

    def can_check_in(self, unique_id: str) -> bool:
        tool = self._tools.find_by_unique_id(unique_id)
        return tool is not None and tool.is_checked_out

    def get_tool_status_info(self, unique_id: str) -> Optional[Dict[str, Any]]:
        """
        Tool plus the staff member holding it.

        Returns:
            {"tool", "assigned_staff", "is_available", "is_checked_out"} or
            None if the tool does not exist
        """
        tool = self._tools.find_by_unique_id(unique_id)
        if not tool:
            return None
        holder = self._staff.find_by_id(tool.holder_id) if tool.holder_id else None
        return {
            "tool": tool,
            "assigned_staff": holder,
            "is_available": tool.is_available,
            "is_checked_out": tool.is_checked_out,
        }

    def get_tools_assigned_to(self, staff_id: str) -> List[Tool]:
        """Tools currently checked out to a staff member."""
        return self._tools.find_by_holder(staff_id)
