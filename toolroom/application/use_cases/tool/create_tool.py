"""
Create Tool Use Case
====================

Business use case for adding a tool to the inventory.
"""
from typing import Any, Dict, List, Optional

from toolroom.domain.exceptions import ConflictError
from toolroom.domain.models.tool import Tool, ToolStatus
from toolroom.domain.repositories.tool_repository import ToolRepository


class CreateToolUseCase:
    """
    Use case for creating a new tool.

    The label code (unique id) must not be in use by another tool.
    """

    def __init__(self, tool_repository: ToolRepository):
        """
        Initialize use case with repository.

        Args:
            tool_repository: Repository for tool persistence
        """
        self._repository = tool_repository

    def execute(
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
        Execute the create tool use case.

        Args:
            unique_id: Code printed on the tool's QR label
            name: Tool name
            brand: Manufacturer
            model: Model designation
            num: Optional serial/asset number
            images: Optional image URLs
            qr_payload: Optional QR payload (defaults to "TOOL#<unique_id>")
            meta: Optional free-form metadata

        Returns:
            Created tool entity

        Raises:
            ValueError: If a required field is missing
            ConflictError: If the unique id is already used
        """
        # Validate inputs
        if not unique_id or not unique_id.strip():
            raise ValueError("Tool unique ID is required")
        if not name or not name.strip():
            raise ValueError("Tool name is required")
        if not brand or not brand.strip():
            raise ValueError("Tool brand is required")
        if not model or not model.strip():
            raise ValueError("Tool model is required")

        unique_id = unique_id.strip()
        if self._repository.find_by_unique_id(unique_id):
            raise ConflictError(f"Tool with unique ID '{unique_id}' already exists")

        tool = Tool(
            id="",
            unique_id=unique_id,
            name=name.strip(),
            brand=brand.strip(),
            model=model.strip(),
            num=(num or "").strip(),
            images=list(images or []),
            qr_payload=qr_payload or Tool.generate_qr_payload(unique_id),
            status=ToolStatus.AVAILABLE,
            meta=dict(meta or {}),
        )
        return self._repository.create(tool)
