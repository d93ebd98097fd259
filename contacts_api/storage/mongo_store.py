"""
Contacts API — MongoDB Document Store
=======================================

What:  DocumentStore implementation using PyMongo's native asyncio client.
How:   One AsyncMongoClient per application; each DocumentStore operation
       maps onto exactly one collection call.
Who:   Selected by build_store() when MONGODB_URI is configured.

Operation mapping:
    find_all      → collection.find({}).sort("_id", 1)
    find_by_id    → collection.find_one({"_id": ObjectId(id)})
    find_first    → collection.find_one({})
    insert        → collection.insert_one(doc)
    update_by_id  → collection.find_one_and_update({"_id": ...}, {"$set": fields},
                                                   return_document=AFTER)
    delete_by_id  → collection.find_one_and_delete({"_id": ...})

Error translation:
    bson.errors.InvalidId                      → InvalidIdentifierError
    WriteError / OperationFailure on writes    → WriteRejectedError
    any other PyMongoError                     → DatabaseError

ObjectIds embed their creation time, so sorting on `_id` returns contacts in
insertion order.
"""

import logging
from typing import Any, List, Optional

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING, AsyncMongoClient, ReturnDocument
from pymongo.errors import OperationFailure, PyMongoError, WriteError

from contacts_api.exceptions import (
    DatabaseError,
    InvalidIdentifierError,
    WriteRejectedError,
)
from contacts_api.storage.base import Document, DocumentStore

logger = logging.getLogger(__name__)


def to_document(raw: Optional[dict]) -> Optional[Document]:
    """Replace MongoDB's `_id` ObjectId with a string `id` key."""
    if raw is None:
        return None
    doc = {k: v for k, v in raw.items() if k != "_id"}
    return {"id": str(raw["_id"]), **doc}


def parse_object_id(doc_id: str) -> ObjectId:
    try:
        return ObjectId(doc_id)
    except (InvalidId, TypeError) as e:
        raise InvalidIdentifierError(doc_id, message=str(e)) from e


class MongoDocumentStore(DocumentStore):
    """
    DocumentStore backed by a MongoDB database.

    Args:
        client:   An AsyncMongoClient (created by from_uri() in production,
                  replaced by a mock in unit tests).
        database: Database name holding the `contacts` and `professionals`
                  collections.

    The client connects lazily: constructing the store never touches the
    network, so an unreachable server only surfaces on the first operation
    (or on ping() during startup).
    """

    backend = "mongodb"

    def __init__(self, client: Any, database: str):
        self._client = client
        self._db = client[database]
        self.database = database

    @classmethod
    def from_uri(cls, uri: str, database: str, timeout_ms: int = 5000) -> "MongoDocumentStore":
        """
        Create a store from a connection string.

        Raises:
            pymongo.errors.ConfigurationError / InvalidURI when the URI cannot
            be parsed. build_store() catches these and falls back to memory.
        """
        client = AsyncMongoClient(
            uri,
            serverSelectionTimeoutMS=timeout_ms,
            appname="contacts-api",
        )
        return cls(client, database)

    def _failure(self, operation: str, collection: str, exc: PyMongoError) -> DatabaseError:
        logger.error("MongoDB %s on '%s' failed: %s", operation, collection, exc)
        return DatabaseError(
            message=str(exc),
            context={
                "operation": operation,
                "collection": collection,
                "error_type": type(exc).__name__,
            },
        )

    # ── Reads ─────────────────────────────────────────────────────────────

    async def find_all(self, collection: str) -> List[Document]:
        try:
            cursor = self._db[collection].find({}).sort("_id", ASCENDING)
            raw_docs = await cursor.to_list(length=None)
        except PyMongoError as e:
            raise self._failure("find", collection, e) from e
        return [to_document(raw) for raw in raw_docs]

    async def find_by_id(self, collection: str, doc_id: str) -> Optional[Document]:
        oid = parse_object_id(doc_id)
        try:
            raw = await self._db[collection].find_one({"_id": oid})
        except PyMongoError as e:
            raise self._failure("find_one", collection, e) from e
        return to_document(raw)

    async def find_first(self, collection: str) -> Optional[Document]:
        try:
            raw = await self._db[collection].find_one({})
        except PyMongoError as e:
            raise self._failure("find_one", collection, e) from e
        return to_document(raw)

    # ── Writes ────────────────────────────────────────────────────────────

    async def insert(self, collection: str, document: Document) -> Document:
        payload = {k: v for k, v in document.items() if k not in ("id", "_id")}
        try:
            result = await self._db[collection].insert_one(payload)
        except (WriteError, OperationFailure) as e:
            logger.warning("MongoDB rejected insert into '%s': %s", collection, e)
            raise WriteRejectedError(
                message=str(e), context={"operation": "insert_one", "collection": collection}
            ) from e
        except PyMongoError as e:
            raise self._failure("insert_one", collection, e) from e
        # insert_one() stamps the generated _id onto the payload dict as well
        payload.pop("_id", None)
        return {"id": str(result.inserted_id), **payload}

    async def update_by_id(
        self, collection: str, doc_id: str, fields: Document
    ) -> Optional[Document]:
        oid = parse_object_id(doc_id)
        changes = {k: v for k, v in fields.items() if k not in ("id", "_id")}
        try:
            if not changes:
                # An empty $set is rejected by the server; nothing to write.
                raw = await self._db[collection].find_one({"_id": oid})
            else:
                raw = await self._db[collection].find_one_and_update(
                    {"_id": oid},
                    {"$set": changes},
                    return_document=ReturnDocument.AFTER,
                )
        except (WriteError, OperationFailure) as e:
            logger.warning("MongoDB rejected update of %s in '%s': %s", doc_id, collection, e)
            raise WriteRejectedError(
                message=str(e),
                context={"operation": "find_one_and_update", "collection": collection},
            ) from e
        except PyMongoError as e:
            raise self._failure("find_one_and_update", collection, e) from e
        return to_document(raw)

    async def delete_by_id(self, collection: str, doc_id: str) -> bool:
        oid = parse_object_id(doc_id)
        try:
            raw = await self._db[collection].find_one_and_delete({"_id": oid})
        except PyMongoError as e:
            raise self._failure("find_one_and_delete", collection, e) from e
        return raw is not None

    # ── Lifecycle ─────────────────────────────────────────────────────────

    async def ping(self) -> bool:
        try:
            await self._client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.warning("MongoDB ping failed: %s", e)
            return False

    async def close(self) -> None:
        await self._client.close()
