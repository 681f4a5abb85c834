# src/meetpulse/adapters/database/sqlite.py
"""
SQLite Document Store Adapter

Implements DocumentStoreProtocol on a local SQLite file.
Each collection is a table of JSON documents, so records stay schema-less.
This adapter is for local development, tests, or offline deployments.
"""

import json
import re
import sqlite3
import logging
import threading
import uuid
from typing import List, Dict, Any, Iterable, Optional, Tuple
from contextlib import contextmanager

from ...core.ports import StoreError

logger = logging.getLogger(__name__)

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def _check_identifier(name: str) -> str:
    if not _IDENTIFIER.match(name):
        raise ValueError(f"Invalid identifier: {name!r}")
    return name


class SQLiteDocumentStore:
    """
    SQLite implementation of DocumentStoreProtocol.

    Documents live in a ``doc`` TEXT column; filters are evaluated with
    ``json_extract``. The autoincrement ``seq`` column keeps insertion order.
    """

    def __init__(self, db_path: str = "meetpulse.db"):
        """
        Initialize SQLite store.

        Args:
            db_path: Path to the SQLite database file, or ":memory:"
        """
        self._db_path = db_path
        self._conn = sqlite3.connect(db_path, check_same_thread=False)
        self._lock = threading.Lock()
        self._tables = set()
        logger.info(f"SQLiteDocumentStore initialized with {db_path}")

    @contextmanager
    def _cursor(self, table: str, operation: str):
        """Serialize access and translate sqlite failures into StoreError."""
        with self._lock:
            try:
                self._ensure_table(table)
                yield self._conn
                self._conn.commit()
            except sqlite3.Error as e:
                try:
                    self._conn.rollback()
                except sqlite3.ProgrammingError:
                    logger.debug("Rollback skipped: connection closed")
                logger.error(f"Error during {operation} on {table}: {e}")
                raise StoreError(table, operation, e) from e

    def _ensure_table(self, table: str):
        if table in self._tables:
            return
        self._conn.execute(
            f"CREATE TABLE IF NOT EXISTS {_check_identifier(table)} "
            "(seq INTEGER PRIMARY KEY AUTOINCREMENT, doc TEXT NOT NULL)"
        )
        self._tables.add(table)

    def _where(
        self,
        filters: Optional[Dict[str, Any]],
        in_filters: Optional[Dict[str, Iterable[Any]]] = None,
    ) -> Tuple[str, List[Any]]:
        conditions = []
        params: List[Any] = []

        for key, value in (filters or {}).items():
            path = f"json_extract(doc, '$.{_check_identifier(key)}')"
            if value is None:
                conditions.append(f"{path} IS NULL")
            else:
                conditions.append(f"{path} = ?")
                params.append(value)

        for key, values in (in_filters or {}).items():
            values = list(values)
            if not values:
                conditions.append("0")
                continue
            placeholders = ", ".join("?" for _ in values)
            conditions.append(f"json_extract(doc, '$.{_check_identifier(key)}') IN ({placeholders})")
            params.extend(values)

        if not conditions:
            return "", params
        return " WHERE " + " AND ".join(conditions), params

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
        where, params = self._where(filters, in_filters)
        query = f"SELECT doc FROM {_check_identifier(table)}{where} ORDER BY seq"
        if limit:
            query += f" LIMIT {int(limit)}"

        with self._cursor(table, "find") as conn:
            rows = conn.execute(query, params).fetchall()
        return [json.loads(row[0]) for row in rows]

    def find_one(self, table: str, filters: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Get the first document matching the filters."""
        rows = self.find(table, filters, limit=1)
        return rows[0] if rows else None

    def count(self, table: str, filters: Optional[Dict[str, Any]] = None) -> int:
        """Count documents matching the filters."""
        where, params = self._where(filters)
        with self._cursor(table, "count") as conn:
            row = conn.execute(
                f"SELECT COUNT(*) FROM {_check_identifier(table)}{where}", params
            ).fetchone()
        return row[0] if row else 0

    # =============================================================================
    # WRITE OPERATIONS
    # =============================================================================

    def insert(self, table: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a document, assigning an ``id`` when it has none."""
        doc = {k: v for k, v in data.items() if v is not None}
        doc.setdefault("id", uuid.uuid4().hex)
        with self._cursor(table, "insert") as conn:
            conn.execute(
                f"INSERT INTO {_check_identifier(table)} (doc) VALUES (?)",
                (json.dumps(doc),)
            )
        return doc

    def upsert(
        self,
        table: str,
        data: Dict[str, Any],
        conflict_columns: List[str],
    ) -> Dict[str, Any]:
        """Merge ``data`` into the document matching conflict columns, or insert it."""
        where, params = self._where({col: data.get(col) for col in conflict_columns})
        with self._cursor(table, "upsert") as conn:
            row = conn.execute(
                f"SELECT seq, doc FROM {_check_identifier(table)}{where} ORDER BY seq LIMIT 1",
                params
            ).fetchone()
            if row:
                doc = json.loads(row[1])
                doc.update(data)
                conn.execute(
                    f"UPDATE {table} SET doc = ? WHERE seq = ?",
                    (json.dumps(doc), row[0])
                )
            else:
                doc = dict(data)
                doc.setdefault("id", uuid.uuid4().hex)
                conn.execute(
                    f"INSERT INTO {table} (doc) VALUES (?)",
                    (json.dumps(doc),)
                )
        return doc

    # =============================================================================
    # CONNECTION MANAGEMENT
    # =============================================================================

    def is_connected(self) -> bool:
        """Check if the database file answers a trivial query."""
        try:
            with self._lock:
                self._conn.execute("SELECT 1")
            return True
        except sqlite3.Error:
            return False

    def close(self):
        """Close the database connection."""
        with self._lock:
            self._conn.close()
