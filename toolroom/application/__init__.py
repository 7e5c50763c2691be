"""
Application Layer
=================

Use cases, services and DTOs that sit between the API and the domain.
"""
