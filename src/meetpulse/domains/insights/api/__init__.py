# src/meetpulse/domains/insights/api/__init__.py
"""
AI Insights Domain API Routes
"""

from .insights import router

__all__ = ["router"]
