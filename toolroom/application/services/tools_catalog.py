"""
Tools Catalog
=============

In-memory snapshot of every tool, kept for list screens and the tools API.

The snapshot reloads lazily: after `invalidate()` (every write through the
API calls it) or once it is older than CATALOG_MAX_AGE_SECONDS. A failed
load moves the catalog to the error state and keeps the previous snapshot;
`retry()` tries again.
"""
import logging
import threading
import time
from enum import Enum
from typing import Any, Dict, List, Optional

from toolroom.application.services.tool_service import ToolService
from toolroom.domain.models.tool import Tool, ToolStatus

logger = logging.getLogger(__name__)

STATUS_ALL = "all"


class LoadingState(str, Enum):
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


class ToolsCatalog:
    """
    Cached tool lists with status, text, brand and model filters.
    """

    def __init__(self, tool_service: ToolService, max_age_seconds: float = 30):
        """
        Args:
            tool_service: Service used to load and change tools
            max_age_seconds: Snapshot lifetime; 0 reloads on every read
        """
        self._service = tool_service
        self._max_age = max_age_seconds
        self._lock = threading.Lock()

        self._all_tools: List[Tool] = []
        self._available_tools: List[Tool] = []
        self._checked_out_tools: List[Tool] = []
        self._by_id: Dict[str, Tool] = {}
        self._by_unique_id: Dict[str, Tool] = {}

        self._loading_state = LoadingState.LOADING
        self._error_message: Optional[str] = None
        self._loaded_at: Optional[float] = None
        self._stale = True

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def loading_state(self) -> LoadingState:
        return self._loading_state

    @property
    def is_loading(self) -> bool:
        return self._loading_state is LoadingState.LOADING

    @property
    def has_error(self) -> bool:
        return self._loading_state is LoadingState.ERROR

    @property
    def error_message(self) -> Optional[str]:
        return self._error_message

    def refresh(self) -> bool:
        """
        Reload every tool and rebuild the cached lists.

        Returns:
            True on success; on failure the error is recorded, not raised
        """
        with self._lock:
            try:
                tools = self._service.list_tools()
            except Exception as e:
                logger.error("Error loading tools: %s", e)
                self._loading_state = LoadingState.ERROR
                self._error_message = f"Failed to load tools: {e}"
                return False

            self._all_tools = tools
            self._available_tools = [tool for tool in tools if tool.is_available]
            self._checked_out_tools = [tool for tool in tools if tool.is_checked_out]
            self._by_id = {tool.id: tool for tool in tools}
            self._by_unique_id = {tool.unique_id: tool for tool in tools}

            self._loading_state = LoadingState.LOADED
            self._error_message = None
            self._loaded_at = time.monotonic()
            self._stale = False
            logger.debug("Tools catalog loaded: %d tools", len(tools))
            return True

    def invalidate(self) -> None:
        """Mark the snapshot stale; the next read reloads it."""
        self._stale = True

    def retry(self) -> bool:
        """Reload after a failure. Does nothing unless in the error state."""
        if not self.has_error:
            return False
        self._loading_state = LoadingState.LOADING
        self._error_message = None
        return self.refresh()

    def clear_error(self) -> None:
        """Drop the error message but stay in the error state."""
        if self.has_error:
            self._error_message = None

    def _needs_reload(self) -> bool:
        if self._stale or self._loaded_at is None:
            return True
        return time.monotonic() - self._loaded_at >= self._max_age

    def _ensure_fresh(self) -> None:
        if not self.has_error and self._needs_reload():
            self.refresh()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def tools(self) -> List[Tool]:
        self._ensure_fresh()
        return list(self._all_tools)

    @property
    def available_tools(self) -> List[Tool]:
        self._ensure_fresh()
        return list(self._available_tools)

    @property
    def checked_out_tools(self) -> List[Tool]:
        self._ensure_fresh()
        return list(self._checked_out_tools)

    @property
    def total_tools(self) -> int:
        self._ensure_fresh()
        return len(self._all_tools)

    @property
    def available_count(self) -> int:
        self._ensure_fresh()
        return len(self._available_tools)

    @property
    def checked_out_count(self) -> int:
        self._ensure_fresh()
        return len(self._checked_out_tools)

    def get_counts(self) -> Dict[str, int]:
        self._ensure_fresh()
        return {
            "total": len(self._all_tools),
            "available": len(self._available_tools),
            "checked_out": len(self._checked_out_tools),
        }

    def get_tool_by_id(self, tool_id: str) -> Optional[Tool]:
        self._ensure_fresh()
        return self._by_id.get(tool_id)

    def get_tool_by_unique_id(self, unique_id: str) -> Optional[Tool]:
        self._ensure_fresh()
        return self._by_unique_id.get(unique_id)

    def can_check_out(self, unique_id: str) -> bool:
        tool = self.get_tool_by_unique_id(unique_id)
        return tool is not None and tool.is_available

    def can_check_in(self, unique_id: str) -> bool:
        tool = self.get_tool_by_unique_id(unique_id)
        return tool is not None and tool.is_checked_out

    def search_tools(self, query: str) -> List[Tool]:
        tools = self.tools
        if not query:
            return tools
        return [tool for tool in tools if tool.matches(query)]

    def get_tools_by_status(self, status: str) -> List[Tool]:
        """Tools with the given status; unknown values return every tool."""
        status = (status or "").lower()
        if status == ToolStatus.AVAILABLE:
            return self.available_tools
        if status == ToolStatus.CHECKED_OUT:
            return self.checked_out_tools
        return self.tools

    def get_filtered_tools(
        self,
        status: Optional[str] = None,
        search_query: Optional[str] = None,
        brand: Optional[str] = None,
        model: Optional[str] = None,
    ) -> List[Tool]:
        """
        Combine the status, text, brand and model filters.

        "all" (or no status) skips the status filter. Brand and model
        compare case-insensitively.
        """
        if status and status != STATUS_ALL:
            filtered = self.get_tools_by_status(status)
        else:
            filtered = self.tools

        if search_query:
            filtered = [tool for tool in filtered if tool.matches(search_query)]
        if brand:
            filtered = [tool for tool in filtered if tool.brand.lower() == brand.lower()]
        if model:
            filtered = [tool for tool in filtered if tool.model.lower() == model.lower()]
        return filtered

    def get_all_brands(self) -> List[str]:
        return sorted({tool.brand for tool in self.tools})

    def get_all_models(self) -> List[str]:
        return sorted({tool.model for tool in self.tools})

    def get_models_for_brand(self, brand: str) -> List[str]:
        brand = (brand or "").lower()
        return sorted({tool.model for tool in self.tools if tool.brand.lower() == brand})

    # ------------------------------------------------------------------
    # Writes (delegated to ToolService)
    # ------------------------------------------------------------------

    def create_tool(self, **fields: Any) -> Tool:
        tool = self._service.create_tool(**fields)
        self.invalidate()
        return tool

    def update_tool(self, tool_id: str, updates: Dict[str, Any]) -> Tool:
        tool = self._service.update_tool(tool_id, updates)
        self.invalidate()
        return tool

    def delete_tool(self, tool_id: str) -> bool:
        deleted = self._service.delete_tool(tool_id)
        self.invalidate()
        return deleted
