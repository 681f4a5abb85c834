# src/meetpulse/repositories/__init__.py
"""
Repository Layer

Collection-specific data access over an injected document store.

Usage:
    from src.meetpulse.repositories import get_meeting_repository

    meetings = get_meeting_repository()
    meeting = meetings.get_by_id("m1")
"""

from .base import BaseRepository
from .users import UserRepository
from .meetings import MeetingRepository
from .feedback import FeedbackRepository
from .insights import InsightRepository


def get_user_repository() -> UserRepository:
    """Get the user repository on the configured store."""
    from ..core.container import container
    return container.user_repository()


def get_meeting_repository() -> MeetingRepository:
    """Get the meeting repository on the configured store."""
    from ..core.container import container
    return container.meeting_repository()


def get_feedback_repository() -> FeedbackRepository:
    """Get the feedback repository on the configured store."""
    from ..core.container import container
    return container.feedback_repository()


def get_insight_repository() -> InsightRepository:
    """Get the AI insight repository on the configured store."""
    from ..core.container import container
    return container.insight_repository()


__all__ = [
    "BaseRepository",
    "UserRepository",
    "MeetingRepository",
    "FeedbackRepository",
    "InsightRepository",
    "get_user_repository",
    "get_meeting_repository",
    "get_feedback_repository",
    "get_insight_repository",
]
