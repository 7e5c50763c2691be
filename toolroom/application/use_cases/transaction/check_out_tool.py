"""
Check Out Tool Use Case
=======================

Hands one tool to a staff member.
"""
import logging
from typing import Optional

from toolroom.application.use_cases.transaction.base import TransactionResult, TransactionUseCase
from toolroom.domain.exceptions import ConflictError

logger = logging.getLogger(__name__)


class CheckOutToolUseCase(TransactionUseCase):
    """
    Use case for checking a tool out.

    The tool, the holder's assigned tool list and the history entry are
    committed in one write batch.
    """

    def execute(
        self,
        unique_id: str,
        staff_id: str,
        performed_by: Optional[str] = None,
        supervisor_id: Optional[str] = None,
        notes: Optional[str] = None,
        location: Optional[str] = None,
    ) -> TransactionResult:
        """
        Execute the check-out use case.

        Args:
            unique_id: Label code of the tool
            staff_id: Staff member receiving the tool
            performed_by: Staff member recording the check-out (defaults to the receiver)
            supervisor_id: Optional authorising supervisor
            notes: Optional free text
            location: Optional site/location

        Returns:
            TransactionResult with the updated tool and the history entry

        Raises:
            NotFoundError: If the tool or a staff member does not exist
            ConflictError: If the tool is checked out or the receiver is inactive
        """
        tool = self._require_tool(unique_id)
        if not tool.is_available:
            raise ConflictError(f"Tool is already checked out: {tool.unique_id}")

        holder = self._require_staff(staff_id)
        performer = holder
        if performed_by and performed_by != holder.uid:
            performer = self._require_staff(performed_by)

        batch = self._new_batch()
        entry = self._stage_checkout(
            batch, tool, holder, performer, supervisor_id, notes, location
        )
        batch.commit()

        logger.info("Tool checked out: %s to %s", tool.unique_id, holder.full_name)
        return TransactionResult(tool=tool, entry=entry)
