"""
Shared fixtures: an in-memory stand-in for the Motor airports collection and
a TestClient wired to it.

The lifespan is never entered (no ``with TestClient(...)``), so nothing
tries to reach a real MongoDB.
"""

import re
from types import SimpleNamespace

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError

from app.core.config import AIRPORTS_COLLECTION, Settings
from app.core.database import ConnectionState, Database
from app.main import create_app


def _matches(doc: dict, query: dict) -> bool:
    for field, condition in query.items():
        value = doc.get(field)
        if isinstance(condition, dict) and "$regex" in condition:
            flags = re.IGNORECASE if "i" in condition.get("$options", "") else 0
            if not isinstance(value, str) or not re.search(condition["$regex"], value, flags):
                return False
        elif value != condition:
            return False
    return True


class FakeCursor:
    def __init__(self, docs):
        self._docs = docs

    async def to_list(self, length=None):
        return [dict(d) for d in self._docs][:length]


class FakeCollection:
    """Just enough of AsyncIOMotorCollection, with a unique iataCode index."""

    def __init__(self, docs=None):
        self.docs = [dict(d) for d in (docs or [])]
        self.fail = False
        self.writes = 0

    def _check(self):
        if self.fail:
            raise ServerSelectionTimeoutError("No servers found yet")

    def find(self, query=None):
        self._check()
        return FakeCursor([d for d in self.docs if _matches(d, query or {})])

    async def count_documents(self, query, limit=0):
        self._check()
        count = sum(1 for d in self.docs if _matches(d, query))
        return min(count, limit) if limit else count

    async def insert_one(self, doc):
        self._check()
        if any(d.get("iataCode") == doc.get("iataCode") for d in self.docs):
            raise DuplicateKeyError("E11000 duplicate key error")
        doc.setdefault("_id", ObjectId())
        self.docs.append(dict(doc))
        self.writes += 1
        return SimpleNamespace(inserted_id=doc["_id"])

    async def update_one(self, query, update):
        self._check()
        for doc in self.docs:
            if _matches(doc, query):
                doc.update(update["$set"])
                self.writes += 1
                return SimpleNamespace(matched_count=1, modified_count=1)
        return SimpleNamespace(matched_count=0, modified_count=0)

    async def delete_one(self, query):
        self._check()
        for i, doc in enumerate(self.docs):
            if _matches(doc, query):
                del self.docs[i]
                self.writes += 1
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)


SEED_AIRPORTS = [
    {"name": "O'Hare International Airport", "iataCode": "ORD", "city": "Chicago"},
    {"name": "Chicago Midway International Airport", "iataCode": "MDW", "city": "Chicago"},
    {"name": "John F. Kennedy International Airport", "iataCode": "JFK", "city": "New York"},
]


@pytest.fixture
def settings():
    return Settings(MONGO_URI="mongodb://localhost:27017", MONGO_DB_NAME="airports_test")


@pytest.fixture
def collection():
    return FakeCollection([dict(a, _id=ObjectId()) for a in SEED_AIRPORTS])


@pytest.fixture
def database(settings, collection):
    """A Database handle in the CONNECTED state backed by the fake collection."""
    db = Database.from_settings(settings)
    db.db = {AIRPORTS_COLLECTION: collection}
    db.state = ConnectionState.CONNECTED
    return db


@pytest.fixture
def client(settings, database):
    return TestClient(create_app(settings=settings, database=database))


@pytest.fixture
def empty_collection(collection):
    collection.docs.clear()
    return collection
