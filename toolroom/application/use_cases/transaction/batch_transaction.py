"""
Batch Transaction Use Cases
===========================

Check several tools out to one staff member, or back in, as a single batch.
Every tool is validated before anything is written; tools that fail are
reported and the rest are committed together with a batch record.
"""
import logging
import uuid
from typing import Iterable, List, Optional

from toolroom.application.use_cases.transaction.base import BatchOutcome, TransactionUseCase
from toolroom.domain.models.tool import Tool
from toolroom.domain.models.tool_history import ToolAction, ToolBatch
from toolroom.domain.references import SYSTEM_STAFF_ID, staff_ref

logger = logging.getLogger(__name__)


def _dedupe(unique_ids: Iterable[str]) -> List[str]:
    seen = []
    for unique_id in unique_ids:
        unique_id = (unique_id or "").strip()
        if unique_id and unique_id not in seen:
            seen.append(unique_id)
    return seen


class _BatchUseCase(TransactionUseCase):

    def _partition(self, unique_ids: List[str], action: ToolAction, outcome: BatchOutcome) -> List[Tool]:
        if not unique_ids:
            raise ValueError("At least one tool is required")

        valid = []
        for unique_id in unique_ids:
            tool = self._tools.find_by_unique_id(unique_id)
            if not tool:
                outcome.failed[unique_id] = "Tool not found"
            elif action is ToolAction.CHECKOUT and not tool.is_available:
                outcome.failed[unique_id] = "Tool is already checked out"
            elif action is ToolAction.CHECKIN and tool.is_available:
                outcome.failed[unique_id] = "Tool is already available"
            else:
                valid.append(tool)
        return valid


class BatchCheckOutUseCase(_BatchUseCase):
    """Use case for checking several tools out to one staff member."""

    def execute(
        self,
        unique_ids: Iterable[str],
        staff_id: str,
        performed_by: Optional[str] = None,
        supervisor_id: Optional[str] = None,
        notes: Optional[str] = None,
        location: Optional[str] = None,
    ) -> BatchOutcome:
        """
        Execute the batch check-out.

        Raises:
            ValueError: If no tool ids were given
            NotFoundError: If the receiver or performer does not exist
            ConflictError: If the receiver is inactive
        """
        holder = self._require_staff(staff_id)
        performer = holder
        if performed_by and performed_by != holder.uid:
            performer = self._require_staff(performed_by)

        outcome = BatchOutcome(action=ToolAction.CHECKOUT)
        tools = self._partition(_dedupe(unique_ids), ToolAction.CHECKOUT, outcome)
        if not tools:
            logger.warning("Batch check-out skipped: no valid tools")
            return outcome

        batch_id = str(uuid.uuid4())
        batch = self._new_batch()
        for tool in tools:
            self._stage_checkout(
                batch, tool, holder, performer, supervisor_id, notes, location, batch_id
            )
            outcome.succeeded.append(tool.unique_id)

        record = ToolBatch(
            id=batch_id,
            created_by=staff_ref(performer.uid),
            tool_ids=list(outcome.succeeded),
            action=ToolAction.CHECKOUT,
            assigned_to_ref=staff_ref(holder.uid),
            notes=notes,
            metadata={"staffName": holder.full_name, "toolCount": len(tools)},
        )
        self._batches.stage_save(batch, record)
        batch.commit()

        outcome.batch = record
        logger.info(
            "Batch %s: %d tools checked out to %s (%d failed)",
            batch_id, len(tools), holder.full_name, len(outcome.failed),
        )
        return outcome


class BatchCheckInUseCase(_BatchUseCase):
    """Use case for checking several tools back in."""

    def execute(
        self,
        unique_ids: Iterable[str],
        performed_by: Optional[str] = None,
        notes: Optional[str] = None,
        location: Optional[str] = None,
    ) -> BatchOutcome:
        performer = self._require_staff(performed_by, must_be_active=False) if performed_by else None

        outcome = BatchOutcome(action=ToolAction.CHECKIN)
        tools = self._partition(_dedupe(unique_ids), ToolAction.CHECKIN, outcome)
        if not tools:
            logger.warning("Batch check-in skipped: no valid tools")
            return outcome

        batch_id = str(uuid.uuid4())
        batch = self._new_batch()
        for tool in tools:
            self._stage_checkin(batch, tool, performer, notes, location, batch_id)
            outcome.succeeded.append(tool.unique_id)

        record = ToolBatch(
            id=batch_id,
            created_by=staff_ref(performer.uid if performer else SYSTEM_STAFF_ID),
            tool_ids=list(outcome.succeeded),
            action=ToolAction.CHECKIN,
            notes=notes,
            metadata={"toolCount": len(tools)},
        )
        self._batches.stage_save(batch, record)
        batch.commit()

        outcome.batch = record
        logger.info("Batch %s: %d tools checked in (%d failed)", batch_id, len(tools), len(outcome.failed))
        return outcome
