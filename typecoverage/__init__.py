"""ABOUTME: typecoverage package root.
ABOUTME: Roster type coverage analysis and type recommendations."""

__version__ = "0.1.0"
