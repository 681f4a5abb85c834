# src/meetpulse/repositories/base.py
"""
Base Repository

Shared plumbing for collection-specific repositories. Each repository is
bound to one collection of an injected DocumentStoreProtocol.
"""

from typing import Any, Dict, List, Optional

from ..core.ports import DocumentStoreProtocol


class BaseRepository:
    """
    Base repository over a single store collection.

    Subclasses set ``table`` and add the domain-specific operations.
    """

    table: str = ""

    def __init__(self, store: DocumentStoreProtocol):
        self._store = store

    def get_all(self, filters: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """
        Get all records, optionally filtered by field equality.

        Args:
            filters: Field -> value equality filters

        Returns:
            Records in insertion order
        """
        return self._store.find(self.table, filters or None)

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a new record and return the stored version."""
        return self._store.insert(self.table, data)
