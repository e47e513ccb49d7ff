"""
Shared fixtures for the income API tests.
"""

import pytest
from fastapi.testclient import TestClient

from income_api.api.app import create_app
from income_api.entities import IncomeRecordEntity

NOW = 1_700_000_000


class FakeIncomeStore:
    """In-memory IncomeStore that records every call."""

    def __init__(self, records=None, error=None, healthy=True):
        self.records = list(records or [])
        self.error = error
        self.healthy = healthy
        self.calls = []
        self.closed = False

    async def get_income(self, start, end):
        self.calls.append(("get_income", start, end))
        if self.error:
            raise self.error
        return self.records

    async def remove_income(self, income_id):
        self.calls.append(("remove_income", income_id))
        if self.error:
            raise self.error

    async def edit_income(self, income_id, patch):
        self.calls.append(("edit_income", income_id, patch))
        if self.error:
            raise self.error

    async def health_check(self):
        return self.healthy

    async def close(self):
        self.closed = True


@pytest.fixture
def records():
    return [
        IncomeRecordEntity(id="a1", description="Salary", timestamp=1500, category="salary", amount=3200.0),
        IncomeRecordEntity(id="b2", description="", timestamp=1200, category="gift", amount=50.0),
    ]


@pytest.fixture
def store(records):
    return FakeIncomeStore(records=records)


@pytest.fixture
def failing_store():
    return FakeIncomeStore(error=ConnectionError("redis down"))


@pytest.fixture
def client(store):
    """Create a test client backed by the fake store and a fixed clock."""
    return TestClient(create_app(store=store, clock=lambda: float(NOW)))


@pytest.fixture
def failing_client(failing_store):
    return TestClient(create_app(store=failing_store, clock=lambda: float(NOW)))
