# src/meetpulse/adapters/database/supabase.py
"""
Supabase Document Store Adapter

Implements DocumentStoreProtocol using Supabase as the backend.
This is the primary production store. Every collection is a table of jsonb
documents, so records stay schema-less like the SQLite store:

    create table <collection> (
        seq bigint generated always as identity primary key,
        doc jsonb not null
    );

Filters compare ``doc->>field``, the text form of the field.
"""

import json
import os
import logging
import uuid
from typing import List, Dict, Any, Iterable, Optional

from supabase import create_client, Client

from ...core.ports import StoreError

logger = logging.getLogger(__name__)


def _field(name: str) -> str:
    return f"doc->>{name}"


def _as_text(value: Any) -> str:
    """Render a value the way Postgres ``->>`` renders the same jsonb value."""
    if isinstance(value, str):
        return value
    return json.dumps(value)


class SupabaseDocumentStore:
    """
    Supabase implementation of DocumentStoreProtocol.

    Uses Supabase's PostgREST API for all store operations. Unlike a
    best-effort cache, every failure is logged and re-raised as StoreError
    so callers can tell "no rows" from "no answer".
    """

    def __init__(
        self,
        url: Optional[str] = None,
        key: Optional[str] = None,
        client: Optional[Client] = None,
    ):
        """
        Initialize Supabase store.

        Args:
            url: Supabase project URL (defaults to SUPABASE_URL env var)
            key: Supabase anon/service key (defaults to SUPABASE_KEY env var)
            client: Pre-built client; skips client creation when given
        """
        if client is not None:
            self._client = client
        else:
            self._url = url or os.getenv("SUPABASE_URL")
            self._key = key or os.getenv("SUPABASE_KEY")

            if not self._url or not self._key:
                raise ValueError("SUPABASE_URL and SUPABASE_KEY must be set")

            self._client = create_client(self._url, self._key)
        logger.info("SupabaseDocumentStore initialized")

    @property
    def client(self) -> Client:
        """Get the underlying Supabase client."""
        return self._client

    def _apply_filters(
        self,
        query,
        filters: Optional[Dict[str, Any]],
        in_filters: Optional[Dict[str, Iterable[Any]]] = None,
    ):
        for key, value in (filters or {}).items():
            if value is None:
                query = query.is_(_field(key), "null")
            else:
                query = query.eq(_field(key), _as_text(value))
        for key, values in (in_filters or {}).items():
            query = query.in_(_field(key), [_as_text(v) for v in values])
        return query

    def _select(
        self,
        table: str,
        filters: Optional[Dict[str, Any]],
        in_filters: Optional[Dict[str, Iterable[Any]]] = None,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        query = self._apply_filters(
            self._client.table(table).select("seq, doc"), filters, in_filters
        ).order("seq")
        if limit:
            query = query.limit(limit)
        return query.execute().data or []

    # =============================================================================
    # QUERY OPERATIONS
    # =============================================================================

    def find(
        self,
        table: str,
        filters: Optional[Dict[str, Any]] = None,
        in_filters: Optional[Dict[str, Iterable[Any]]] = None,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """Get all documents matching the filters, in insertion order."""
        if in_filters and any(not list(v) for v in in_filters.values()):
            return []
        try:
            rows = self._select(table, filters, in_filters, limit)
        except Exception as e:
            logger.error(f"Error finding in {table}: {e}")
            raise StoreError(table, "find", e) from e
        return [row["doc"] for row in rows]

    def find_one(self, table: str, filters: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Get the first document matching the filters."""
        rows = self.find(table, filters, limit=1)
        return rows[0] if rows else None

    def count(self, table: str, filters: Optional[Dict[str, Any]] = None) -> int:
        """Count documents in a table with optional filters."""
        try:
            query = self._apply_filters(
                self._client.table(table).select("seq", count="exact"), filters
            )
            result = query.execute()
            return result.count or 0
        except Exception as e:
            logger.error(f"Error counting {table}: {e}")
            raise StoreError(table, "count", e) from e

    # =============================================================================
    # WRITE OPERATIONS
    # =============================================================================

    def insert(self, table: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a document, assigning an ``id`` when it has none."""
        doc = {k: v for k, v in data.items() if v is not None}
        doc.setdefault("id", uuid.uuid4().hex)
        try:
            self._client.table(table).insert({"doc": doc}).execute()
        except Exception as e:
            logger.error(f"Error inserting into {table}: {e}")
            raise StoreError(table, "insert", e) from e
        return doc

    def upsert(
        self,
        table: str,
        data: Dict[str, Any],
        conflict_columns: List[str],
    ) -> Dict[str, Any]:
        """Merge ``data`` into the document matching conflict columns, or insert it."""
        try:
            existing = self._select(
                table, {col: data.get(col) for col in conflict_columns}, limit=1
            )
            if existing:
                doc = dict(existing[0]["doc"])
                doc.update(data)
                self._client.table(table).update({"doc": doc}).eq(
                    "seq", existing[0]["seq"]
                ).execute()
                return doc
        except Exception as e:
            logger.error(f"Error upserting into {table}: {e}")
            raise StoreError(table, "upsert", e) from e
        return self.insert(table, data)

    # =============================================================================
    # CONNECTION MANAGEMENT
    # =============================================================================

    def is_connected(self) -> bool:
        """Check if Supabase answers a minimal query."""
        try:
            self._client.table("users").select("seq", count="exact").limit(0).execute()
            return True
        except Exception as e:
            logger.warning(f"Supabase health check failed: {e}")
            return False
