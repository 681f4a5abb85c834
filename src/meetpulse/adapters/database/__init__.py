# src/meetpulse/adapters/database/__init__.py
"""
Database adapters package.

Contains concrete implementations of DocumentStoreProtocol for different backends.
"""

from .supabase import SupabaseDocumentStore
from .sqlite import SQLiteDocumentStore

__all__ = [
    "SupabaseDocumentStore",
    "SQLiteDocumentStore",
]
