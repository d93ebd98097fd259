"""
Contacts API — In-Memory Document Store
=========================================

What:  DocumentStore implementation backed by per-instance Python dicts.
Who:   Used by the test suite and as the development stand-in when no
       MONGODB_URI is configured.
When:  Created per application (or per test); never a module-level global.

Identifiers use the same ObjectId scheme as MongoDB, so a malformed id
produces the same InvalidIdentifierError in both modes.

Limitations:
    State lives only as long as the process. There is no locking, so the
    store is only suitable for a single-process development server.
"""

import copy
import logging
from typing import Dict, List, Optional

from bson import ObjectId

from contacts_api.exceptions import InvalidIdentifierError
from contacts_api.storage.base import CONTACTS, Document, DocumentStore

logger = logging.getLogger(__name__)


SAMPLE_CONTACTS: List[Document] = [
    {
        "firstName": "Alice",
        "lastName": "Doe",
        "email": "alice@example.com",
        "favoriteColor": "Red",
        "birthday": "1999-05-10",
    },
    {
        "firstName": "Bob",
        "lastName": "Smith",
        "email": "bob@example.com",
        "favoriteColor": "Green",
        "birthday": "1990-08-15",
    },
]


class InMemoryDocumentStore(DocumentStore):
    """
    Dict-of-dicts document store.

    Layout:
        self._collections = {
            "contacts": {"65f0c0ffee...": {"id": "65f0c0ffee...", "firstName": ...}},
            "professionals": {...},
        }

    Python dicts preserve insertion order, which gives find_all() and
    find_first() the same ordering a fresh MongoDB collection has.
    Returned documents are deep copies so callers cannot mutate stored state.
    """

    backend = "memory"

    def __init__(self, initial: Optional[Dict[str, List[Document]]] = None):
        self._collections: Dict[str, Dict[str, Document]] = {}
        for collection, documents in (initial or {}).items():
            for document in documents:
                self._insert_sync(collection, document)

    @classmethod
    def with_sample_contacts(cls) -> "InMemoryDocumentStore":
        """Build a store pre-populated with the two sample contacts."""
        store = cls(initial={CONTACTS: SAMPLE_CONTACTS})
        logger.info("In-memory store seeded with %d sample contacts", len(SAMPLE_CONTACTS))
        return store

    # ── Helpers ───────────────────────────────────────────────────────────

    def _collection(self, name: str) -> Dict[str, Document]:
        return self._collections.setdefault(name, {})

    @staticmethod
    def _check_id(doc_id: str) -> str:
        if not ObjectId.is_valid(doc_id):
            raise InvalidIdentifierError(doc_id)
        return str(ObjectId(doc_id))

    def _insert_sync(self, collection: str, document: Document) -> Document:
        doc_id = str(ObjectId())
        stored = {"id": doc_id}
        stored.update(
            (k, copy.deepcopy(v)) for k, v in document.items() if k not in ("id", "_id")
        )
        self._collection(collection)[doc_id] = stored
        return copy.deepcopy(stored)

    # ── DocumentStore API ─────────────────────────────────────────────────

    async def find_all(self, collection: str) -> List[Document]:
        return [copy.deepcopy(doc) for doc in self._collection(collection).values()]

    async def find_by_id(self, collection: str, doc_id: str) -> Optional[Document]:
        doc = self._collection(collection).get(self._check_id(doc_id))
        return copy.deepcopy(doc) if doc is not None else None

    async def find_first(self, collection: str) -> Optional[Document]:
        for doc in self._collection(collection).values():
            return copy.deepcopy(doc)
        return None

    async def insert(self, collection: str, document: Document) -> Document:
        return self._insert_sync(collection, document)

    async def update_by_id(
        self, collection: str, doc_id: str, fields: Document
    ) -> Optional[Document]:
        doc = self._collection(collection).get(self._check_id(doc_id))
        if doc is None:
            return None
        for key, value in fields.items():
            if key in ("id", "_id"):
                continue
            doc[key] = copy.deepcopy(value)
        return copy.deepcopy(doc)

    async def delete_by_id(self, collection: str, doc_id: str) -> bool:
        return self._collection(collection).pop(self._check_id(doc_id), None) is not None

    async def ping(self) -> bool:
        return True
