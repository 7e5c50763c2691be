"""
Tool Repository Interface
=========================

Abstract interface for tool data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from toolroom.domain.models.tool import Tool
from toolroom.domain.repositories.write_batch import WriteBatch


class ToolRepository(ABC):
    """
    Abstract repository for tool persistence operations.
    """

    @abstractmethod
    def new_id(self) -> str:
        """Generate a fresh document id."""
        pass

    @abstractmethod
    def create(self, tool: Tool) -> Tool:
        """
        Create a new tool.

        Args:
            tool: Tool entity to create. An empty id is replaced by a generated one.

        Returns:
            Created tool entity
        """
        pass

    @abstractmethod
    def update(self, tool: Tool) -> Tool:
        """
        Update an existing tool.

        Raises:
            NotFoundError: If the tool does not exist
        """
        pass

    @abstractmethod
    def find_by_id(self, tool_id: str) -> Optional[Tool]:
        pass

    @abstractmethod
    def find_by_unique_id(self, unique_id: str) -> Optional[Tool]:
        """Find a tool by the code printed on its label."""
        pass

    @abstractmethod
    def find_all(
        self,
        status: Optional[str] = None,
        limit: int = 0,
        offset: int = 0,
    ) -> List[Tool]:
        """
        List tools, most recently updated first.

        Args:
            status: Optional status filter
            limit: Maximum number of tools (0 for no limit)
            offset: Number of tools to skip
        """
        pass

    @abstractmethod
    def find_by_holder(self, staff_uid: str) -> List[Tool]:
        """Find tools currently held by a staff member."""
        pass

    @abstractmethod
    def count(self, status: Optional[str] = None) -> int:
        pass

    @abstractmethod
    def delete(self, tool_id: str) -> bool:
        """
        Delete a tool.

        Returns:
            True if the tool existed, False otherwise
        """
        pass

    @abstractmethod
    def delete_all(self) -> int:
        """Delete every tool. Returns the number removed."""
        pass

    @abstractmethod
    def stage_save(self, batch: WriteBatch, tool: Tool) -> None:
        """Stage a full write of the tool onto a batch."""
        pass
