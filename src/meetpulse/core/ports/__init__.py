# src/meetpulse/core/ports/__init__.py
"""
Port Interfaces for Dependency Inversion

Protocol-based interfaces that adapters must implement.
"""

from .protocols import DocumentStoreProtocol, StoreError

__all__ = [
    "DocumentStoreProtocol",
    "StoreError",
]
