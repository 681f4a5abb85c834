# tests/conftest.py
"""
Pytest configuration and fixtures for the MeetPulse test suite.

Provides:
- In-memory SQLite document store injected into the container
- Supabase mock client for exercising the Supabase adapter
- FastAPI test client
- Factories for profiles, meetings and feedback

Note: Tests never reach a real Supabase project or the OpenAI API.
"""

import json
import os
import pytest
from typing import Generator, Dict, Any, List, Optional
from fastapi.testclient import TestClient

# Set test environment before imports
os.environ["MEETPULSE_ENV"] = "test"
os.environ["DATABASE_TYPE"] = "sqlite"
os.environ["SQLITE_DB_PATH"] = ":memory:"


from src.meetpulse.main import app
from src.meetpulse.core.container import container
from src.meetpulse.adapters.database.sqlite import SQLiteDocumentStore


# ============== Supabase Mock Fixtures ==============

class MockSupabaseResponse:
    """Mock response from Supabase operations."""
    def __init__(self, data: List[Dict] = None, count: int = None):
        self.data = data or []
        self.count = count if count is not None else len(self.data)


class MockSupabaseTable:
    """
    Mock Supabase table with chainable methods.

    Rows have the two real columns, ``seq`` and ``doc``. Filters on
    ``doc->>field`` compare the text form of the document field, as
    PostgREST does. Writing any other column raises, like PostgREST
    rejecting an unknown column.
    """

    COLUMNS = {"seq", "doc"}

    def __init__(self, table_name: str, client: "MockSupabaseClient"):
        self.table_name = table_name
        self._client = client
        self._filters = []
        self._limit = None
        self._insert: Optional[List[Dict]] = None
        self._update: Optional[Dict] = None

    @staticmethod
    def _resolve(row: Dict, column: str) -> Any:
        if column.startswith("doc->>"):
            value = row["doc"].get(column[len("doc->>"):])
            if value is None or isinstance(value, str):
                return value
            return json.dumps(value)
        return row.get(column)

    def _check_columns(self, data: Dict):
        unknown = set(data) - self.COLUMNS
        if unknown:
            raise ValueError(f"column {sorted(unknown)} of '{self.table_name}' does not exist")

    def select(self, columns: str = "*", count: str = None):
        return self

    def insert(self, data: Dict):
        self._check_columns(data)
        self._insert = [dict(data)]
        return self

    def update(self, data: Dict):
        self._check_columns(data)
        self._update = dict(data)
        return self

    def eq(self, column: str, value: Any):
        self._filters.append(lambda row: self._resolve(row, column) == value)
        return self

    def is_(self, column: str, value: str):
        self._filters.append(lambda row: self._resolve(row, column) is None)
        return self

    def in_(self, column: str, values: List[Any]):
        allowed = list(values)
        self._filters.append(lambda row: self._resolve(row, column) in allowed)
        return self

    def order(self, column: str, desc: bool = False):
        return self

    def limit(self, count: int):
        self._limit = count
        return self

    def execute(self) -> MockSupabaseResponse:
        """Execute the query and return results."""
        if self._client.fail:
            raise ConnectionError("Supabase unreachable")

        table = self._client.tables.setdefault(self.table_name, [])
        if self._insert is not None:
            written = []
            for row in self._insert:
                row["seq"] = len(table) + 1
                table.append(row)
                written.append(row)
            return MockSupabaseResponse(data=written)

        data = [row for row in table if all(p(row) for p in self._filters)]
        if self._update is not None:
            for row in data:
                row.update(self._update)
            return MockSupabaseResponse(data=data)

        count = len(data)
        if self._limit is not None:
            data = data[:self._limit]
        return MockSupabaseResponse(data=data, count=count)


class MockSupabaseClient:
    """Mock Supabase client for testing."""

    def __init__(self):
        self.tables: Dict[str, List[Dict]] = {}
        self.fail = False

    def table(self, name: str) -> MockSupabaseTable:
        return MockSupabaseTable(name, self)

    def seed_data(self, table_name: str, docs: List[Dict]):
        """Seed documents into a table."""
        self.tables[table_name] = [
            {"seq": i, "doc": dict(doc)} for i, doc in enumerate(docs, start=1)
        ]

    def rows(self, table_name: str) -> List[Dict]:
        """Stored documents of a table, in insertion order."""
        return [row["doc"] for row in self.tables.get(table_name, [])]


@pytest.fixture(scope="function")
def mock_supabase() -> MockSupabaseClient:
    """In-memory stand-in for a supabase-py client."""
    return MockSupabaseClient()


# ============== Store Fixtures ==============

@pytest.fixture(scope="function")
def store() -> Generator[SQLiteDocumentStore, None, None]:
    """Fresh in-memory document store."""
    s = SQLiteDocumentStore(":memory:")
    yield s
    s.close()


# ============== FastAPI Client Fixtures ==============

@pytest.fixture(scope="function")
def client(store) -> Generator[TestClient, None, None]:
    """
    FastAPI test client backed by the in-memory store.

    The store is injected into the container for the duration of the test.
    """
    container.configure(store=store)
    with TestClient(app) as test_client:
        yield test_client
    container.reset()


# ============== Sample Data Factories ==============

@pytest.fixture
def profile_factory():
    """Factory for creating profile payloads."""
    def _create_profile(
        email: str = "host@example.com",
        name: str = "Test Host",
        company: str = "Acme",
        **extra
    ) -> Dict[str, Any]:
        return {"email": email, "name": name, "company": company, **extra}
    return _create_profile


@pytest.fixture
def meeting_factory():
    """Factory for creating meeting payloads."""
    def _create_meeting(
        id: str = "m1",
        created_by: str = "host@example.com",
        title: str = "Weekly Sync",
        date: str = "2024-01-15",
        **extra
    ) -> Dict[str, Any]:
        return {
            "id": id,
            "createdBy": created_by,
            "title": title,
            "date": date,
            **extra
        }
    return _create_meeting


@pytest.fixture
def feedback_factory():
    """Factory for creating feedback payloads."""
    def _create_feedback(
        meeting_id: str = "m1",
        user_id: str = "attendee@example.com",
        responses: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        return {
            "meetingId": meeting_id,
            "userId": user_id,
            "responses": responses if responses is not None else {"overallSatisfaction": 4},
        }
    return _create_feedback


# ============== Assertion Helpers ==============

@pytest.fixture
def assert_response_success():
    """Helper to assert successful API responses."""
    def _assert(response, status_code: int = 200):
        assert response.status_code == status_code, f"Expected {status_code}, got {response.status_code}: {response.text}"
        return response.json()
    return _assert


@pytest.fixture
def assert_response_error():
    """Helper to assert error API responses."""
    def _assert(response, status_code: int = 400, message: str = None):
        assert response.status_code == status_code
        if message:
            assert message in response.json().get("message", "")
        return response.json()
    return _assert
