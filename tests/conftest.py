"""
Contacts API — Test Configuration (conftest.py)
=================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures:
    ├── memory_store: Empty InMemoryDocumentStore (fresh per test)
    ├── mock_store: AsyncMock shaped like a DocumentStore
    ├── sample_contact: Valid POST /contacts body
    ├── test_client: HTTPX AsyncClient bound to an app serving memory_store
    └── make_client: Builds an AsyncClient around any store (e.g. mock_store)
"""

import os

# Settings are read at import time; keep tests off any real database.
os.environ["MONGODB_URI"] = ""
os.environ["LOG_LEVEL"] = "WARNING"

from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from contacts_api.main import create_app
from contacts_api.storage import DocumentStore, InMemoryDocumentStore


@pytest.fixture
def memory_store():
    """A fresh, empty in-memory store for each test."""
    return InMemoryDocumentStore()


@pytest.fixture
def mock_store():
    """
    An AsyncMock with the DocumentStore interface.

    Usage:
        mock_store.find_by_id.return_value = {"id": "...", "firstName": "A"}
        mock_store.find_all.side_effect = DatabaseError("connection refused")
    """
    store = AsyncMock(spec=DocumentStore)
    store.backend = "mock"
    return store


@pytest.fixture
def sample_contact():
    return {
        "firstName": "A",
        "lastName": "B",
        "email": "a@b.com",
        "favoriteColor": "Red",
        "birthday": "2000-01-01",
    }


@pytest.fixture
def make_client():
    """
    Factory for HTTP clients around an arbitrary store.

    Usage:
        async with make_client(mock_store) as client:
            response = await client.get("/contacts")
    """
    def _make(store):
        app = create_app(store=store)
        transport = ASGITransport(app=app)
        return AsyncClient(transport=transport, base_url="http://test")

    return _make


@pytest_asyncio.fixture
async def test_client(make_client, memory_store):
    """HTTPX AsyncClient talking to an app backed by memory_store."""
    async with make_client(memory_store) as client:
        yield client
