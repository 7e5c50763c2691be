"""
History Repository Interfaces
=============================

Abstract interfaces for tool history and batch data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Tuple

from toolroom.domain.models.tool_history import ToolAction, ToolBatch, ToolHistory
from toolroom.domain.repositories.write_batch import WriteBatch


class HistoryRepository(ABC):
    """
    Abstract repository for tool history entries.

    All list methods return the newest entries first.
    """

    @abstractmethod
    def new_id(self) -> str:
        pass

    @abstractmethod
    def create(self, entry: ToolHistory) -> ToolHistory:
        pass

    @abstractmethod
    def find_by_id(self, entry_id: str) -> Optional[ToolHistory]:
        pass

    @abstractmethod
    def find(
        self,
        tool_ref: Optional[str] = None,
        staff_ref: Optional[str] = None,
        batch_id: Optional[str] = None,
        action: Optional[ToolAction] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        limit: int = 0,
        offset: int = 0,
    ) -> List[ToolHistory]:
        """
        Query history entries.

        Args:
            tool_ref: Only entries for this tool path
            staff_ref: Only entries performed by or assigned to this staff path
            batch_id: Only entries from this batch
            action: Only this action
            start: Inclusive lower bound on timestamp
            end: Inclusive upper bound on timestamp
            limit: Maximum number of entries (0 for no limit)
            offset: Number of entries to skip
        """
        pass

    @abstractmethod
    def count(
        self,
        by_ref: Optional[str] = None,
        action: Optional[ToolAction] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> int:
        """Count entries, optionally filtered by performer, action and time range."""
        pass

    @abstractmethod
    def count_by_performer(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        limit: int = 0,
    ) -> List[Tuple[str, int]]:
        """
        Entry counts grouped by performer path, highest first.

        Ties are ordered by path. Entries without a performer are skipped.
        """
        pass

    @abstractmethod
    def update_notes(self, entry_id: str, notes: str) -> bool:
        pass

    @abstractmethod
    def delete(self, entry_id: str) -> bool:
        pass

    @abstractmethod
    def delete_all(self) -> int:
        pass

    @abstractmethod
    def stage_create(self, batch: WriteBatch, entry: ToolHistory) -> None:
        pass


class BatchRepository(ABC):
    """Abstract repository for batch operation records."""

    @abstractmethod
    def new_id(self) -> str:
        pass

    @abstractmethod
    def save(self, batch_record: ToolBatch) -> ToolBatch:
        pass

    @abstractmethod
    def find_by_id(self, batch_id: str) -> Optional[ToolBatch]:
        pass

    @abstractmethod
    def find_all(self, limit: int = 0) -> List[ToolBatch]:
        """List batches, newest first."""
        pass

    @abstractmethod
    def delete_all(self) -> int:
        pass

    @abstractmethod
    def stage_save(self, batch: WriteBatch, batch_record: ToolBatch) -> None:
        pass
