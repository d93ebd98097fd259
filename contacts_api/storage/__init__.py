"""
Contacts API — Storage Layer
==============================

Store Inventory:
    - DocumentStore (abstract): CRUD contract addressed by collection name and id
    - MongoDocumentStore: PyMongo asyncio client against a MongoDB database
    - InMemoryDocumentStore: per-instance dicts for tests and local development
"""

from contacts_api.storage.base import CONTACTS, PROFESSIONALS, Document, DocumentStore
from contacts_api.storage.memory_store import InMemoryDocumentStore
from contacts_api.storage.mongo_store import MongoDocumentStore

__all__ = [
    "CONTACTS",
    "PROFESSIONALS",
    "Document",
    "DocumentStore",
    "InMemoryDocumentStore",
    "MongoDocumentStore",
]
