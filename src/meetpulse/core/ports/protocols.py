# src/meetpulse/core/ports/protocols.py
"""
Protocol-based Interfaces for MeetPulse

Using typing.Protocol for structural subtyping instead of ABC.
Any object with these methods can be handed to a repository or to the
statistics aggregator, which keeps test doubles trivial.
"""

from typing import Protocol, List, Dict, Any, Iterable, Optional, runtime_checkable


class StoreError(Exception):
    """A store operation could not be completed (unreachable or rejected)."""

    def __init__(self, table: str, operation: str, cause: Optional[BaseException] = None):
        self.table = table
        self.operation = operation
        self.cause = cause
        message = f"{operation} on '{table}' failed"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)


# =============================================================================
# DOCUMENT STORE PROTOCOL
# =============================================================================

@runtime_checkable
class DocumentStoreProtocol(Protocol):
    """
    Protocol for a schema-less document collection store.

    Implementations: SupabaseDocumentStore, SQLiteDocumentStore

    Records are plain dicts. Results come back in insertion order.
    ``filters`` are equality matches; ``in_filters`` map a field to the set of
    values it may take. All conditions are ANDed together.
    Implementations raise StoreError when the backend fails.
    """

    def find(
        self,
        table: str,
        filters: Optional[Dict[str, Any]] = None,
        in_filters: Optional[Dict[str, Iterable[Any]]] = None,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """Return every record matching the filters."""
        ...

    def find_one(self, table: str, filters: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Return the first matching record or None."""
        ...

    def count(self, table: str, filters: Optional[Dict[str, Any]] = None) -> int:
        """Count records matching filters."""
        ...

    def insert(self, table: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a record, returning it with any generated fields."""
        ...

    def upsert(
        self,
        table: str,
        data: Dict[str, Any],
        conflict_columns: List[str],
    ) -> Dict[str, Any]:
        """Update the record matching conflict columns, or insert it."""
        ...

    def is_connected(self) -> bool:
        """Check if the backend is reachable."""
        ...
