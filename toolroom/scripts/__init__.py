"""Maintenance scripts: sample data seeding and smoke checks."""
