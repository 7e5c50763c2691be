"""
Transaction Use Case Base
=========================

Shared lookups and staging for the check-out / check-in use cases.
"""
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from toolroom.domain.exceptions import ConflictError, NotFoundError
from toolroom.domain.models.staff import Staff
from toolroom.domain.models.tool import Tool
from toolroom.domain.models.tool_history import ToolAction, ToolBatch, ToolHistory
from toolroom.domain.references import SYSTEM_STAFF_ID, staff_ref, tool_ref
from toolroom.domain.repositories.history_repository import BatchRepository, HistoryRepository
from toolroom.domain.repositories.staff_repository import StaffRepository
from toolroom.domain.repositories.tool_repository import ToolRepository
from toolroom.domain.repositories.write_batch import WriteBatch


@dataclass
class TransactionResult:
    """Outcome of a single check-out or check-in."""
    tool: Tool
    entry: ToolHistory


@dataclass
class BatchOutcome:
    """
    Outcome of a batch check-out or check-in.

    `batch` is None when no tool passed validation and nothing was written.
    `failed` maps a tool's unique id to the reason it was skipped.
    """
    action: ToolAction
    batch: Optional[ToolBatch] = None
    succeeded: List[str] = field(default_factory=list)
    failed: Dict[str, str] = field(default_factory=dict)

    @property
    def all_succeeded(self) -> bool:
        return not self.failed and bool(self.succeeded)


class TransactionUseCase:
    """Holds the repositories every transaction writes to."""

    def __init__(
        self,
        tool_repository: ToolRepository,
        staff_repository: StaffRepository,
        history_repository: HistoryRepository,
        batch_repository: BatchRepository,
        batch_factory: Callable[[], WriteBatch],
    ):
        """
        Args:
            tool_repository: Repository for tools
            staff_repository: Repository for staff
            history_repository: Repository for history entries
            batch_repository: Repository for batch records
            batch_factory: Returns a fresh WriteBatch for each commit
        """
        self._tools = tool_repository
        self._staff = staff_repository
        self._history = history_repository
        self._batches = batch_repository
        self._new_batch = batch_factory

    def _require_tool(self, unique_id: str) -> Tool:
        if not unique_id or not unique_id.strip():
            raise ValueError("Tool unique ID is required")
        tool = self._tools.find_by_unique_id(unique_id.strip())
        if not tool:
            raise NotFoundError(f"Tool not found: {unique_id}")
        return tool

    def _require_staff(self, uid: str, must_be_active: bool = True) -> Staff:
        if not uid or not uid.strip():
            raise ValueError("Staff ID is required")
        staff = self._staff.find_by_id(uid.strip())
        if not staff:
            raise NotFoundError(f"Staff member not found: {uid}")
        if must_be_active and not staff.is_active:
            raise ConflictError(f"Staff member is inactive: {staff.full_name}")
        return staff

    def _stage_checkout(
        self,
        batch: WriteBatch,
        tool: Tool,
        holder: Staff,
        performer: Staff,
        supervisor_id: Optional[str],
        notes: Optional[str],
        location: Optional[str],
        batch_id: Optional[str] = None,
    ) -> ToolHistory:
        tool.check_out(holder, assigned_by_name=performer.full_name)
        self._tools.stage_save(batch, tool)
        self._staff.stage_assigned_tool(batch, holder.uid, tool.unique_id, assigned=True)

        entry = ToolHistory(
            id="",
            tool_ref=tool_ref(tool.id),
            action=ToolAction.CHECKOUT,
            by_ref=staff_ref(performer.uid),
            supervisor_ref=staff_ref(supervisor_id) if supervisor_id else None,
            assigned_to_ref=staff_ref(holder.uid),
            notes=notes,
            location=location,
            batch_id=batch_id,
            metadata={"staffName": holder.full_name, "toolName": tool.display_name},
        )
        self._history.stage_create(batch, entry)
        return entry

    def _stage_checkin(
        self,
        batch: WriteBatch,
        tool: Tool,
        performer: Optional[Staff],
        notes: Optional[str],
        location: Optional[str],
        batch_id: Optional[str] = None,
    ) -> ToolHistory:
        previous_ref = tool.current_holder
        previous_id = tool.holder_id
        previous_holder = self._staff.find_by_id(previous_id) if previous_id else None

        if performer:
            by_ref = staff_ref(performer.uid)
            checked_in_by = performer.full_name
        elif previous_ref:
            by_ref = previous_ref
            checked_in_by = previous_holder.full_name if previous_holder else None
        else:
            by_ref = staff_ref(SYSTEM_STAFF_ID)
            checked_in_by = None

        tool.check_in(checked_in_by_name=checked_in_by)
        self._tools.stage_save(batch, tool)
        if previous_holder:
            self._staff.stage_assigned_tool(batch, previous_holder.uid, tool.unique_id, assigned=False)

        entry = ToolHistory(
            id="",
            tool_ref=tool_ref(tool.id),
            action=ToolAction.CHECKIN,
            by_ref=by_ref,
            assigned_to_ref=previous_ref,
            notes=notes,
            location=location,
            batch_id=batch_id,
            metadata={
                "staffName": previous_holder.full_name if previous_holder else "Unknown",
                "toolName": tool.display_name,
            },
        )
        self._history.stage_create(batch, entry)
        return entry
