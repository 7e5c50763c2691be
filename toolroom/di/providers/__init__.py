"""
Providers Package
=================

Dependency injection providers for registering dependencies.
"""
from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .tool_provider import ToolProvider
from .staff_provider import StaffProvider
from .transaction_provider import TransactionProvider

__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "ToolProvider",
    "StaffProvider",
    "TransactionProvider",
]
