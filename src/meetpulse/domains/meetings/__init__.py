# src/meetpulse/domains/meetings/__init__.py
"""
Meetings Domain - scheduling and feedback question sets
"""

from .api import router

__all__ = ["router"]
