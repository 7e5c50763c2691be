"""
Domain Exceptions
=================

Use cases raise these; controllers map them to HTTP status codes.
NotFoundError and ConflictError are ValueErrors so callers that only
care about "bad input" can keep catching ValueError.
"""


class NotFoundError(ValueError):
    """A referenced tool, staff member, batch or team does not exist."""


class ConflictError(ValueError):
    """The record exists but is in the wrong state (e.g. tool already checked out)."""


class PermissionDeniedError(Exception):
    """The acting staff member's role does not allow the operation."""

    def __init__(self, action: str, message: str = "") -> None:
        self.action = action
        super().__init__(message or f"Not allowed to {action.replace('_', ' ')}")
