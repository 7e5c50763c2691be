"""
API v1 Package
===============

Version 1 API controllers.
"""
from .tool_controller import router as tool_router
from .staff_controller import router as staff_router
from .transaction_controller import router as transaction_router
from .history_controller import router as history_router
from .team_controller import router as team_router

__all__ = ["tool_router", "staff_router", "transaction_router", "history_router", "team_router"]
