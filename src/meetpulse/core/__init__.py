# src/meetpulse/core/__init__.py
"""
Core domain layer - interfaces and abstractions.

This package contains:
- Port interfaces for the document store
- Domain models and entities
- The dependency container

Following Ports and Adapters (Hexagonal Architecture):
- Ports are the interfaces that define how the domain interacts with the outside world
- Adapters are the concrete implementations of those ports
"""

from .ports import DocumentStoreProtocol, StoreError
from .models import (
    User,
    Meeting,
    Feedback,
    FeedbackQuestion,
    AIInsight,
    UserStats,
)

__all__ = [
    # Ports
    "DocumentStoreProtocol",
    "StoreError",
    # Models
    "User",
    "Meeting",
    "Feedback",
    "FeedbackQuestion",
    "AIInsight",
    "UserStats",
]
