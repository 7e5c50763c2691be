"""
Update Tool Use Case
====================

Applies a partial update to a tool's descriptive fields.
"""
from typing import Any, Dict

from toolroom.domain.exceptions import ConflictError, NotFoundError
from toolroom.domain.models.tool import Tool
from toolroom.domain.repositories.tool_repository import ToolRepository

# Fields a caller may change directly. Status and holder only move through
# check-out/check-in.
EDITABLE_FIELDS = ("unique_id", "name", "brand", "model", "num", "images", "meta")


class UpdateToolUseCase:
    """Use case for editing a tool."""

    def __init__(self, tool_repository: ToolRepository):
        self._repository = tool_repository

    def execute(self, tool_id: str, updates: Dict[str, Any]) -> Tool:
        """
        Execute the update tool use case.

        Args:
            tool_id: Document id of the tool
            updates: Field values keyed by attribute name; unknown keys are ignored

        Returns:
            Updated tool entity

        Raises:
            NotFoundError: If the tool does not exist
            ConflictError: If the new unique id belongs to another tool, or
                the tool is checked out and its unique id would change
            ValueError: If a required field would become empty
        """
        tool = self._repository.find_by_id(tool_id)
        if not tool:
            raise NotFoundError(f"Tool '{tool_id}' not found")

        changes = {
            key: value
            for key, value in updates.items()
            if key in EDITABLE_FIELDS and value is not None
        }

        for key in ("unique_id", "name", "brand", "model"):
            if key in changes:
                changes[key] = str(changes[key]).strip()
                if not changes[key]:
                    raise ValueError(f"Tool {key.replace('_', ' ')} cannot be empty")

        new_unique_id = changes.get("unique_id")
        if new_unique_id and new_unique_id != tool.unique_id:
            # The holder's assignedToolIds stores the unique id
            if tool.is_checked_out:
                raise ConflictError(
                    f"Tool {tool.unique_id} is checked out; check it in before changing its unique ID"
                )
            existing = self._repository.find_by_unique_id(new_unique_id)
            if existing and existing.id != tool.id:
                raise ConflictError(f"Tool with unique ID '{new_unique_id}' already exists")
            tool.qr_payload = Tool.generate_qr_payload(new_unique_id)

        for key, value in changes.items():
            setattr(tool, key, value)

        return self._repository.update(tool)
