# db.py
import logging
from dataclasses import dataclass
from typing import Any, Optional

from bson import ObjectId
from bson.errors import InvalidDocument, InvalidId
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

from inventory_api.config import Settings

LOG = logging.getLogger("inventory.db")

# ints beyond 8 bytes fail BSON encoding with OverflowError
STORE_ERRORS = (PyMongoError, InvalidId, InvalidDocument, OverflowError)


@dataclass
class StoreResult:
    """Outcome of a single data-access call: a value on success, the error otherwise."""
    ok: bool
    value: Any = None
    error: Optional[BaseException] = None

    @classmethod
    def success(cls, value=None) -> "StoreResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: BaseException) -> "StoreResult":
        return cls(ok=False, error=error)


class MongoItemStore:
    """Items kept as documents of one collection: {_id, name, quantity}."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.client = None
        self.collection = None

    # --- MongoDB Setup ---
    def connect(self):
        self.client = AsyncIOMotorClient(self.settings.mongo_url)
        self.collection = self.client[self.settings.db_name][self.settings.coll_name]
        LOG.info("Connected to MongoDB at %s (%s.%s)", self.settings.mongo_url,
                 self.settings.db_name, self.settings.coll_name)

    def close(self):
        if self.client is not None:
            self.client.close()
            self.client = None
            self.collection = None

    # --- Operations ---
    async def insert_item(self, item: dict) -> StoreResult:
        try:
            # insert_one writes _id into the document it is given
            res = await self.collection.insert_one(dict(item))
        except STORE_ERRORS as e:
            return StoreResult.failure(e)
        return StoreResult.success(res.inserted_id)

    async def get_items(self) -> StoreResult:
        try:
            items = await self.collection.find({}).to_list(length=None)
        except STORE_ERRORS as e:
            return StoreResult.failure(e)
        return StoreResult.success(items)

    async def update_quantity(self, item_id: str, delta: int) -> StoreResult:
        """Increment the stored quantity by delta. A missing item is a no-op."""
        try:
            res = await self.collection.update_one(
                {'_id': ObjectId(item_id)},
                {'$inc': {'quantity': delta}}
            )
        except STORE_ERRORS as e:
            return StoreResult.failure(e)
        return StoreResult.success(res.modified_count)

    async def delete_item(self, item_id: str) -> StoreResult:
        try:
            res = await self.collection.delete_one({'_id': ObjectId(item_id)})
        except STORE_ERRORS as e:
            return StoreResult.failure(e)
        return StoreResult.success(res.deleted_count)
