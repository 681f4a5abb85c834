# src/meetpulse/domains/profile/__init__.py
"""
Profile Domain

User profiles and the statistics computed for their hosts:
- Profile read with meetings hosted and average rating
- Per-question rating breakdown
- Profile upsert by email
"""

from .api import router

__all__ = ["router"]
