"""Shared fixtures: an in-memory item store and a client for the app built on it."""

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import PyMongoError

from inventory_api.config import Settings
from inventory_api.db import StoreResult
from inventory_api.main import create_app


class FakeItemStore:
    """In-memory stand-in for MongoItemStore that records every call."""

    def __init__(self):
        self.docs = []
        self.calls = []
        self.fail = False

    def _failure(self):
        return StoreResult.failure(PyMongoError("storage unavailable"))

    async def insert_item(self, item):
        self.calls.append(("insert_item", item))
        if self.fail:
            return self._failure()
        doc = dict(item)
        doc["_id"] = ObjectId()
        self.docs.append(doc)
        return StoreResult.success(doc["_id"])

    async def get_items(self):
        self.calls.append(("get_items",))
        if self.fail:
            return self._failure()
        return StoreResult.success([dict(d) for d in self.docs])

    async def update_quantity(self, item_id, delta):
        self.calls.append(("update_quantity", item_id, delta))
        if self.fail:
            return self._failure()
        modified = 0
        for doc in self.docs:
            if str(doc["_id"]) == item_id:
                doc["quantity"] = doc.get("quantity", 0) + delta
                modified += 1
        return StoreResult.success(modified)

    async def delete_item(self, item_id):
        self.calls.append(("delete_item", item_id))
        if self.fail:
            return self._failure()
        before = len(self.docs)
        self.docs = [d for d in self.docs if str(d["_id"]) != item_id]
        return StoreResult.success(before - len(self.docs))


@pytest.fixture
def store():
    return FakeItemStore()


@pytest.fixture
def client(store):
    with TestClient(create_app(settings=Settings(), store=store)) as c:
        yield c
