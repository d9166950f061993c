"""
Shared test fixtures and utilities for the PlateShare test suite.

The API is exercised through FastAPI's TestClient against an in-memory
stand-in for a pymongo ``Database``. The stand-in implements only the
collection calls the repositories make and returns genuine
``pymongo.results`` objects, so result mapping runs unchanged.
"""

import copy
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo import ASCENDING, DESCENDING
from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError, WriteError
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from main import create_app
from services import common

_MISSING = object()


def _matches(document: dict, filter_doc: dict) -> bool:
    """Exact-equality match on every filter key (no operators)"""
    return all(document.get(key, _MISSING) == value for key, value in filter_doc.items())


class FakeCursor:
    """Subset of pymongo Cursor: sort() and iteration"""

    def __init__(self, documents):
        self._documents = documents

    def sort(self, key_or_list, direction=ASCENDING):
        keys = key_or_list if isinstance(key_or_list, list) else [(key_or_list, direction)]
        # Stable sorts applied from least to most significant key
        for key, key_direction in reversed(keys):
            self._documents.sort(
                key=lambda doc: doc.get(key), reverse=key_direction == DESCENDING
            )
        return self

    def __iter__(self):
        return iter(copy.deepcopy(self._documents))


class FakeCollection:
    """Subset of pymongo Collection used by the repositories"""

    def __init__(self, name: str):
        self.name = name
        self.documents = []
        self.unique_keys = set()

    def create_index(self, key, unique=False):
        if unique:
            self.unique_keys.add(key)
        return f"{key}_1"

    def find_one(self, filter_doc):
        for doc in self.documents:
            if _matches(doc, filter_doc):
                return copy.deepcopy(doc)
        return None

    def find(self, filter_doc=None):
        return FakeCursor([doc for doc in self.documents if _matches(doc, filter_doc or {})])

    def insert_one(self, document):
        for key in self.unique_keys:
            if key in document and any(doc.get(key) == document[key] for doc in self.documents):
                raise DuplicateKeyError(
                    f"E11000 duplicate key error collection: {self.name} index: {key}_1",
                    code=11000,
                    details={"keyPattern": {key: 1}, "keyValue": {key: document[key]}},
                )
        document.setdefault("_id", ObjectId())
        self.documents.append(copy.deepcopy(document))
        return InsertOneResult(document["_id"], True)

    def update_one(self, filter_doc, update):
        fields = update.get("$set")
        if not fields:
            raise WriteError(
                "'$set' is empty. You must specify a field like so: "
                "{$set: {<field>: ...}}",
                code=9,
            )
        if "_id" in fields:
            raise WriteError(
                "Performing an update on the path '_id' would modify the immutable field '_id'",
                code=66,
            )
        for doc in self.documents:
            if _matches(doc, filter_doc):
                modified = any(doc.get(k, _MISSING) != v for k, v in fields.items())
                doc.update(copy.deepcopy(fields))
                return UpdateResult({"n": 1, "nModified": int(modified), "ok": 1.0}, True)
        return UpdateResult({"n": 0, "nModified": 0, "ok": 1.0}, True)

    def delete_one(self, filter_doc):
        for index, doc in enumerate(self.documents):
            if _matches(doc, filter_doc):
                del self.documents[index]
                return DeleteResult({"n": 1, "ok": 1.0}, True)
        return DeleteResult({"n": 0, "ok": 1.0}, True)


class FakeDatabase:
    """In-memory replacement for pymongo.database.Database"""

    def __init__(self, name: str = "plateshareDB", reachable: bool = True):
        self.name = name
        self.reachable = reachable
        self._collections = {}
        self.client = SimpleNamespace(admin=SimpleNamespace(command=self._command))

    def __getitem__(self, name: str) -> FakeCollection:
        if name not in self._collections:
            self._collections[name] = FakeCollection(name)
        return self._collections[name]

    def _command(self, name):
        if not self.reachable:
            raise ServerSelectionTimeoutError("localhost:27017: connection refused")
        return {"ok": 1.0}


def make_food(title: str = "Bread", quantity: int = 2, **extra) -> dict:
    """
    Realistic food listing body.

    Example:
        >>> make_food()
        {'title': 'Bread', 'qty': 2, 'pickup_location': 'Dhaka', 'donor_email': 'donor@example.com'}
    """
    food = {
        "title": title,
        "qty": quantity,
        "pickup_location": "Dhaka",
        "donor_email": "donor@example.com",
    }
    food.update(extra)
    return food


def make_request(food_id: str, requester_email: str = "alice@example.com", **extra) -> dict:
    """Realistic food request body"""
    request = {
        "foodId": food_id,
        "requester_email": requester_email,
        "requester_name": "Alice",
        "notes": "Can pick up after 6pm",
    }
    request.update(extra)
    return request


@pytest.fixture
def fake_db() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
def client(fake_db):
    """TestClient for an app built around ``fake_db``; lifespan runs too"""
    with TestClient(create_app(database=fake_db)) as test_client:
        yield test_client


@pytest.fixture
def ticking_clock(monkeypatch):
    """Make ``createdAt`` advance one second per stamp"""
    start = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)
    ticks = iter(range(10_000))
    monkeypatch.setattr(common, "utc_now", lambda: start + timedelta(seconds=next(ticks)))
    return start
