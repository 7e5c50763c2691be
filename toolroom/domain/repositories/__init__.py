from .write_batch import WriteBatch
from .tool_repository import ToolRepository
from .staff_repository import StaffRepository
from .history_repository import BatchRepository, HistoryRepository
from .team_repository import TeamRepository

__all__ = [
    "WriteBatch",
    "ToolRepository",
    "StaffRepository",
    "HistoryRepository",
    "BatchRepository",
    "TeamRepository",
]
