# tests/unit/__init__.py
"""
Unit tests for MeetPulse.

Unit tests focus on individual functions, classes, and modules in isolation
from the HTTP layer.
"""
