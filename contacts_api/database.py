"""
Contacts API — Document Store Lifecycle & Dependency
======================================================

What:  Builds the application's DocumentStore, checks connectivity at startup,
       and exposes it to route handlers through FastAPI's dependency system.
How:   build_store() chooses the backend from settings; the lifespan handler in
       main.py stores the result on `app.state.store`; get_store() hands it to
       each request.
When:  Store is created once at startup and closed at shutdown.

Backend selection:
    MONGODB_URI set and parseable   → MongoDocumentStore
    MONGODB_URI set but unparseable → logged, InMemoryDocumentStore
    MONGODB_URI empty               → InMemoryDocumentStore
                                      (seeded with sample contacts if enabled)
"""

import logging

from fastapi import Request
from pymongo.errors import PyMongoError

from contacts_api.config import Settings
from contacts_api.storage import DocumentStore, InMemoryDocumentStore, MongoDocumentStore

logger = logging.getLogger(__name__)


def build_store(config: Settings) -> DocumentStore:
    """
    Create the DocumentStore described by `config`.

    Never raises: a missing or broken connection string degrades to the
    in-memory store so the process can still serve requests.
    """
    if config.uses_mongodb:
        try:
            store = MongoDocumentStore.from_uri(
                config.mongodb_uri,
                database=config.mongodb_database,
                timeout_ms=config.mongodb_timeout_ms,
            )
            logger.info("Using MongoDB document store (database=%s)", config.mongodb_database)
            return store
        except (PyMongoError, ValueError) as e:
            logger.error("Invalid MONGODB_URI, falling back to in-memory store: %s", e)
    else:
        logger.warning(
            "MONGODB_URI is not set. Using the in-memory store; data will not persist."
        )

    if config.seed_sample_contacts:
        return InMemoryDocumentStore.with_sample_contacts()
    return InMemoryDocumentStore()


async def check_store(store: DocumentStore) -> bool:
    """
    Ping the store once at startup.

    An unreachable store is logged but does not stop the service: GET /,
    GET /professional, /health and the docs keep working.
    """
    reachable = await store.ping()
    if reachable:
        logger.info("Document store reachable (backend=%s)", store.backend)
    else:
        logger.error(
            "Document store unreachable (backend=%s). Contact endpoints will fail "
            "until it becomes available.",
            store.backend,
        )
    return reachable


def get_store(request: Request) -> DocumentStore:
    """
    FastAPI dependency returning the application's DocumentStore.

    Example usage in a route:
        @router.get("/contacts")
        async def list_contacts(store: DocumentStore = Depends(get_store)):
            return await contact_service.list_contacts(store)
    """
    return request.app.state.store
