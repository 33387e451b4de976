"""Root conftest — shared test configuration and the in-memory MongoDB double.

Invariants:
    - Environment fixed before blogsphere.main is imported (settings are cached)
    - Every test gets a fresh FakeDatabase; collections can be told to raise pymongo errors
    - get_submission_store overridden so routes use a MongoSubmissionStore over the fake

Design Decisions:
    - Fake at the pymongo boundary (insert_one/command), not at the store: the real
      MongoSubmissionStore, error mapping and document layout are exercised end to end
"""

import os
from collections import defaultdict
from pathlib import Path

import pytest
from bson import ObjectId
from httpx import ASGITransport, AsyncClient
from pymongo.results import InsertOneResult

REPO_ROOT = Path(__file__).resolve().parents[2]

os.environ.setdefault("MONGO_URI", "mongodb://127.0.0.1:27017/blogsphere_test")
os.environ.setdefault("STATIC_DIR", str(REPO_ROOT / "public"))

from blogsphere.infrastructure.database import (  # noqa: E402
    MongoSubmissionStore, get_submission_store,
)
from blogsphere.main import app  # noqa: E402


class FakeCollection:
    """Stands in for AsyncCollection; records inserted documents."""

    def __init__(self):
        self.documents: list[dict] = []
        self.error: Exception | None = None

    async def insert_one(self, document: dict) -> InsertOneResult:
        if self.error:
            raise self.error
        document.setdefault("_id", ObjectId())
        self.documents.append(dict(document))
        return InsertOneResult(document["_id"], True)


class FakeDatabase:
    """Stands in for AsyncDatabase: item access per collection plus command()."""

    def __init__(self, name: str = "blogsphere_test"):
        self.name = name
        self.collections: defaultdict[str, FakeCollection] = defaultdict(FakeCollection)
        self.command_error: Exception | None = None

    def __getitem__(self, name: str) -> FakeCollection:
        return self.collections[name]

    async def command(self, name: str) -> dict:
        if self.command_error:
            raise self.command_error
        return {"ok": 1.0}


@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
def store(fake_db):
    return MongoSubmissionStore(fake_db)


@pytest.fixture
async def client(store):
    """FastAPI test client with the store dependency overridden."""
    app.dependency_overrides[get_submission_store] = lambda: store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def bare_client():
    """Client with no store injected, as if startup never created one."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
