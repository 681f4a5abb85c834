# src/meetpulse/domains/feedback/__init__.py
"""
Feedback Domain - attendee answers to a meeting's questions
"""

from .api import router

__all__ = ["router"]
