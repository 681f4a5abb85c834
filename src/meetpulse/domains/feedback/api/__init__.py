# src/meetpulse/domains/feedback/api/__init__.py
"""
Feedback Domain API Routes
"""

from .submissions import router

__all__ = ["router"]
