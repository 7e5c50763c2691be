"""
Check In Tool Use Case
======================

Returns one tool to the store.
"""
import logging
from typing import Optional

from toolroom.application.use_cases.transaction.base import TransactionResult, TransactionUseCase
from toolroom.domain.exceptions import ConflictError

logger = logging.getLogger(__name__)


class CheckInToolUseCase(TransactionUseCase):
    """Use case for checking a tool back in."""

    def execute(
        self,
        unique_id: str,
        performed_by: Optional[str] = None,
        notes: Optional[str] = None,
        location: Optional[str] = None,
    ) -> TransactionResult:
        """
        Execute the check-in use case.

        The entry is attributed to `performed_by`, else to the previous
        holder, else to the system account.

        Raises:
            NotFoundError: If the tool or the performer does not exist
            ConflictError: If the tool is not checked out
        """
        tool = self._require_tool(unique_id)
        if tool.is_available:
            raise ConflictError(f"Tool is already available: {tool.unique_id}")

        performer = self._require_staff(performed_by, must_be_active=False) if performed_by else None

        batch = self._new_batch()
        entry = self._stage_checkin(batch, tool, performer, notes, location)
        batch.commit()

        logger.info("Tool checked in: %s", tool.unique_id)
        return TransactionResult(tool=tool, entry=entry)
