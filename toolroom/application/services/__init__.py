"""
Application Services
====================

High-level services used by the API, the scripts and the tools catalog.
"""
from .tool_service import ToolService
from .staff_service import StaffService
from .transaction_service import ToolTransactionService
from .history_service import HistoryService
from .team_service import TeamService
from .tools_catalog import LoadingState, ToolsCatalog

__all__ = [
    "ToolService",
    "StaffService",
    "ToolTransactionService",
    "HistoryService",
    "TeamService",
    "ToolsCatalog",
    "LoadingState",
]
