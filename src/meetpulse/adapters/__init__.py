# src/meetpulse/adapters/__init__.py
"""
Adapters package - concrete implementations of port interfaces.

- database/supabase.py - Supabase document store (production)
- database/sqlite.py - SQLite document store (local/offline)
"""

from .database.supabase import SupabaseDocumentStore
from .database.sqlite import SQLiteDocumentStore

__all__ = [
    "SupabaseDocumentStore",
    "SQLiteDocumentStore",
]
