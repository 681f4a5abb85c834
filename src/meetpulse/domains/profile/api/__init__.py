# src/meetpulse/domains/profile/api/__init__.py
"""
Profile Domain API Routes
"""

from .profile import router

__all__ = ["router"]
