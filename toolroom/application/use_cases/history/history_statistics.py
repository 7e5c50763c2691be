"""
History Statistics Use Cases
============================

Aggregates over the tool history collection for dashboards and audit views.
"""
from datetime import date, datetime, time, timedelta
from typing import Dict, List, Optional

from toolroom.domain.models.tool_history import ToolAction
from toolroom.domain.references import ref_id, staff_ref
from toolroom.domain.repositories.history_repository import HistoryRepository
from toolroom.utils.datetime_utils import now


class GetActionStatisticsUseCase:
    """Count history entries per action."""

    def __init__(self, history_repository: HistoryRepository):
        self._repository = history_repository

    def execute(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        staff_id: Optional[str] = None,
    ) -> Dict[str, int]:
        """
        Returns:
            Mapping of action value ("checkout", "checkin") to count
        """
        by_ref = staff_ref(staff_id) if staff_id else None
        return {
            action.value: self._repository.count(by_ref=by_ref, action=action, start=start, end=end)
            for action in ToolAction
        }


class GetMostActiveStaffUseCase:
    """Rank staff by the number of entries they performed."""

    def __init__(self, history_repository: HistoryRepository):
        self._repository = history_repository

    def execute(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        limit: int = 10,
    ) -> List[Dict[str, object]]:
        """
        Returns:
            [{"staffId": ..., "activityCount": ...}, ...] highest count first,
            ties in staff id order
        """
        ranking = self._repository.count_by_performer(start=start, end=end, limit=limit)
        return [
            {"staffId": ref_id(by_ref), "activityCount": count}
            for by_ref, count in ranking
        ]


class GetDailyActivityCountUseCase:
    """Count entries recorded on one calendar day in the application timezone."""

    def __init__(self, history_repository: HistoryRepository):
        self._repository = history_repository

    def execute(self, day: Optional[date] = None) -> int:
        current = now()
        day = day or current.date()
        start = datetime.combine(day, time.min, tzinfo=current.tzinfo)
        end = start + timedelta(days=1) - timedelta(milliseconds=1)
        return self._repository.count(start=start, end=end)
