"""
History Service
===============

Read access to tool history and batch records, plus the aggregates the
dashboard and audit views need.
"""
import logging
from datetime import date, datetime
from typing import Dict, List, Optional

from toolroom.application.use_cases.history.history_statistics import (
    GetActionStatisticsUseCase,
    GetDailyActivityCountUseCase,
    GetMostActiveStaffUseCase,
)
from toolroom.domain.models.tool_history import ToolAction, ToolBatch, ToolHistory
from toolroom.domain.references import staff_ref, tool_ref
from toolroom.domain.repositories.history_repository import BatchRepository, HistoryRepository

logger = logging.getLogger(__name__)


class HistoryService:
    """Application service for tool history."""

    def __init__(
        self,
        history_repository: HistoryRepository,
        batch_repository: BatchRepository,
        default_limit: int = 50,
    ):
        """
        Initialize service with repositories.

        Args:
            history_repository: Repository for history entries
            batch_repository: Repository for batch records
            default_limit: Page size when a caller gives none
        """
        self._repository = history_repository
        self._batches = batch_repository
        self._default_limit = default_limit
        self._statistics_use_case = GetActionStatisticsUseCase(history_repository)
        self._most_active_use_case = GetMostActiveStaffUseCase(history_repository)
        self._daily_count_use_case = GetDailyActivityCountUseCase(history_repository)

    def _limit(self, limit: Optional[int]) -> int:
        return self._default_limit if limit is None else limit

    def get_entry(self, entry_id: str) -> Optional[ToolHistory]:
        return self._repository.find_by_id(entry_id)

    def get_tool_history(self, tool_id: str, limit: Optional[int] = None) -> List[ToolHistory]:
        """Entries for one tool (by document id), newest first."""
        return self._repository.find(tool_ref=tool_ref(tool_id), limit=self._limit(limit))

    def get_staff_history(self, staff_id: str, limit: Optional[int] = None) -> List[ToolHistory]:
        """Entries a staff member performed or was assigned, newest first."""
        return self._repository.find(staff_ref=staff_ref(staff_id), limit=self._limit(limit))

    def get_recent_activity(self, limit: int = 10) -> List[ToolHistory]:
        return self._repository.find(limit=limit)

    def get_history(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        staff_id: Optional[str] = None,
        action: Optional[ToolAction] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[ToolHistory]:
        """Filtered, paginated history."""
        return self._repository.find(
            staff_ref=staff_ref(staff_id) if staff_id else None,
            action=action,
            start=start,
            end=end,
            limit=self._limit(limit),
            offset=offset,
        )

    def get_batch(self, batch_id: str) -> Optional[ToolBatch]:
        return self._batches.find_by_id(batch_id)

    def get_batch_history(self, batch_id: str) -> List[ToolHistory]:
        """Every entry written by one batch operation."""
        return self._repository.find(batch_id=batch_id)

    def list_batches(self, limit: Optional[int] = None) -> List[ToolBatch]:
        return self._batches.find_all(limit=self._limit(limit))

    def get_activity_count(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        staff_id: Optional[str] = None,
        action: Optional[ToolAction] = None,
    ) -> int:
        return self._repository.count(
            by_ref=staff_ref(staff_id) if staff_id else None,
            action=action,
            start=start,
            end=end,
        )

    def get_daily_activity_count(self, day: Optional[date] = None) -> int:
        return self._daily_count_use_case.execute(day)

    def get_action_statistics(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        staff_id: Optional[str] = None,
    ) -> Dict[str, int]:
        return self._statistics_use_case.execute(start=start, end=end, staff_id=staff_id)

    def get_most_active_staff(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        limit: int = 10,
    ) -> List[Dict[str, object]]:
        return self._most_active_use_case.execute(start=start, end=end, limit=limit)

    def update_notes(self, entry_id: str, notes: str) -> bool:
        updated = self._repository.update_notes(entry_id, notes)
        if updated:
            logger.info("History notes updated: %s", entry_id)
        return updated

    def delete_entry(self, entry_id: str) -> bool:
        return self._repository.delete(entry_id)
