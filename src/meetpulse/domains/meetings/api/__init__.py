# src/meetpulse/domains/meetings/api/__init__.py
"""
Meetings Domain API Routes
"""

from .crud import router

__all__ = ["router"]
