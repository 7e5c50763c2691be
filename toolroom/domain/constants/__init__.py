"""Field name constants shared by repositories and seed scripts."""
from .staff_fields import StaffFields
from .tool_fields import ToolFields
from .history_fields import HistoryFields, BatchFields
from .team_fields import TeamFields

__all__ = ["StaffFields", "ToolFields", "HistoryFields", "BatchFields", "TeamFields"]
