"""
Tool Service
============

Application service that coordinates tool inventory operations.
This service orchestrates multiple use cases.
"""
import logging
import time
from typing import Any, Dict, List, Optional

from toolroom.application.use_cases.tool.create_tool import CreateToolUseCase
from toolroom.application.use_cases.tool.update_tool import UpdateToolUseCase
from toolroom.domain.exceptions import ConflictError
from toolroom.domain.models.tool import Tool, ToolStatus
from toolroom.domain.repositories.tool_repository import ToolRepository

logger = logging.getLogger(__name__)

REQUIRED_TOOL_FIELDS = ("uniqueId", "name", "brand", "model")


class ToolService:
    """
    Application service for tool operations.

    This service coordinates multiple use cases and provides
    a high-level interface for inventory management.
    """

    def __init__(self, tool_repository: ToolRepository):
        """
        Initialize service with repository.

        Args:
            tool_repository: Repository for tool persistence
        """
        self._repository = tool_repository
        self._create_use_case = CreateToolUseCase(tool_repository)
        self._update_use_case = UpdateToolUseCase(tool_repository)

    def create_tool(
        self,
        unique_id: str,
        name: str,
        brand: str,
        model: str,
        num: str = "",
        images: Optional[List[str]] = None,
        qr_payload: Optional[str] = None,
        meta: Optional[Dict[str, Any]] = None,
    ) -> Tool:
        """
        Add a tool to the inventory.

        Args:
            unique_id: Code printed on the QR label
            name: Tool name
            brand: Manufacturer
            model: Model designation
            num: Optional serial/asset number
            images: Optional image URLs
            qr_payload: Optional QR payload (defaults to "TOOL#<unique_id>")
            meta: Optional free-form metadata

        Returns:
            Created tool entity
        """
        return self._create_use_case.execute(
            unique_id=unique_id,
            name=name,
            brand=brand,
            model=model,
            num=num,
            images=images,
            qr_payload=qr_payload,
            meta=meta,
        )

    def get_tool(self, tool_id: str) -> Optional[Tool]:
        """
        Get a tool by document ID.

        Args:
            tool_id: Document id

        Returns:
            Tool entity if found, None otherwise
        """
        return self._repository.find_by_id(tool_id)

    def get_tool_by_unique_id(self, unique_id: str) -> Optional[Tool]:
        """Get a tool by the code printed on its label."""
        if not unique_id:
            return None
        return self._repository.find_by_unique_id(unique_id.strip())

    def update_tool(self, tool_id: str, updates: Dict[str, Any]) -> Tool:
        """
        Update a tool's descriptive fields.

        Args:
            tool_id: Document id
            updates: Attribute values to change; unknown keys are ignored

        Returns:
            Updated tool entity
        """
        return self._update_use_case.execute(tool_id, updates)

    def delete_tool(self, tool_id: str) -> bool:
        """
        Delete a tool.

        Returns:
            True if the tool was found and deleted, False otherwise

        Raises:
            ConflictError: If the tool is still checked out
        """
        tool = self._repository.find_by_id(tool_id)
        if tool and tool.is_checked_out:
            raise ConflictError(f"Tool is checked out and cannot be deleted: {tool.unique_id}")
        return self._repository.delete(tool_id)

    def list_tools(
        self,
        status: Optional[str] = None,
        search: Optional[str] = None,
        limit: int = 0,
        offset: int = 0,
    ) -> List[Tool]:
        """
        List tools, most recently updated first.

        Args:
            status: "available" or "checked_out"; anything else lists every tool
            search: Optional case-insensitive text filter
            limit: Maximum number of tools (0 = no limit)
            offset: Number of tools to skip

        Returns:
            List of tool entities
        """
        if status not in ToolStatus.ALL:
            status = None

        if not search:
            return self._repository.find_all(status=status, limit=limit, offset=offset)

        # Text search runs over the whole listing, then pages the matches
        tools = [tool for tool in self._repository.find_all(status=status) if tool.matches(search)]
        end = offset + limit if limit else None
        return tools[offset:end]

    def search_tools(self, query: str) -> List[Tool]:
        """Search tools by name, brand, model, unique id or number."""
        return self.list_tools(search=(query or "").strip())

    def get_tools_by_holder(self, staff_uid: str) -> List[Tool]:
        return self._repository.find_by_holder(staff_uid)

    def get_counts(self) -> Dict[str, int]:
        """Total, available and checked-out tool counts."""
        return {
            "total": self._repository.count(),
            "available": self._repository.count(ToolStatus.AVAILABLE),
            "checked_out": self._repository.count(ToolStatus.CHECKED_OUT),
        }

    @staticmethod
    def generate_unique_id() -> str:
        """Clock-based label code, "T" plus four digits."""
        millis = int(time.time() * 1000)
        return f"T{millis % 10000:04d}"

    @staticmethod
    def validate_tool_data(tool_data: Dict[str, Any]) -> bool:
        """
        Check a raw tool payload has every required field.

        Args:
            tool_data: Document-shaped dict (camelCase keys)

        Returns:
            True if uniqueId, name, brand and model are all non-empty
        """
        for field_name in REQUIRED_TOOL_FIELDS:
            value = tool_data.get(field_name)
            if value is None or not str(value).strip():
                logger.debug("Validation failed: missing or empty field: %s", field_name)
                return False
        return True
