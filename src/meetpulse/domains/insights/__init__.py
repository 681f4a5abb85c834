# src/meetpulse/domains/insights/__init__.py
"""
Insights Domain - AI summaries of collected feedback
"""

from .api import router

__all__ = ["router"]
