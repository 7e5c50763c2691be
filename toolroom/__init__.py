"""Toolroom: tool checkout and inventory tracking backend."""

__version__ = "1.0.0"
