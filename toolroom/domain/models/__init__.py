from .staff import Staff, StaffRole
from .tool import Tool, ToolStatus
from .tool_history import ToolAction, ToolBatch, ToolHistory
from .team import Team

__all__ = [
    "Staff",
    "StaffRole",
    "Tool",
    "ToolStatus",
    "ToolAction",
    "ToolBatch",
    "ToolHistory",
    "Team",
]
