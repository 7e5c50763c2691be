"""
Infrastructure Layer
====================

MongoDB connection management, write batches and repository implementations.
"""
