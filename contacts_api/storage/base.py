"""
Contacts API — Abstract Document Store Interface
==================================================

What:  Abstract base class defining the CRUD contract every document store
       implementation must honor.
How:   Concrete implementations (MongoDocumentStore, InMemoryDocumentStore)
       inherit from DocumentStore. Services receive a store per call and never
       know which backend is in use.
Who:   Called by ContactService, ProfessionalService and the health route.

Document shape at this boundary:
    Plain dicts. Every document returned by a store carries an `id` key
    holding the identifier as a string; the backend's native key (`_id` for
    MongoDB) never leaks out of the implementation.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

Document = Dict[str, Any]

CONTACTS = "contacts"
PROFESSIONALS = "professionals"


class DocumentStore(ABC):
    """
    Abstract interface for a collection-addressed document store.

    Contract:
        - Each operation is a single store-level call (no fetch-then-write).
        - Absence is reported as None / False, never as an exception.
        - Malformed identifiers raise InvalidIdentifierError.
        - Writes the store refuses raise WriteRejectedError.
        - Every other backend failure is wrapped in DatabaseError.
        - No retries: a failure surfaces immediately to the caller.
    """

    #: Short backend name reported by the health endpoint.
    backend: str = "unknown"

    @abstractmethod
    async def find_all(self, collection: str) -> List[Document]:
        """Return every document in `collection`, in insertion order."""
        ...

    @abstractmethod
    async def find_by_id(self, collection: str, doc_id: str) -> Optional[Document]:
        """Return the document with identifier `doc_id`, or None."""
        ...

    @abstractmethod
    async def find_first(self, collection: str) -> Optional[Document]:
        """Return the first document found in `collection`, or None if it is empty."""
        ...

    @abstractmethod
    async def insert(self, collection: str, document: Document) -> Document:
        """
        Persist a new document.

        Args:
            collection: Target collection name.
            document:   Field values. Any `id` key is ignored; the store assigns one.

        Returns:
            The persisted document including its assigned `id`.
        """
        ...

    @abstractmethod
    async def update_by_id(
        self, collection: str, doc_id: str, fields: Document
    ) -> Optional[Document]:
        """
        Overwrite the given fields of one document and return the result.

        Fields not present in `fields` are left unchanged. Returns None when
        no document has identifier `doc_id`.
        """
        ...

    @abstractmethod
    async def delete_by_id(self, collection: str, doc_id: str) -> bool:
        """Remove one document. Returns False when nothing matched."""
        ...

    @abstractmethod
    async def ping(self) -> bool:
        """
        Lightweight connectivity check.

        Returns: True if the backend is reachable, False otherwise. Never raises.
        """
        ...

    async def close(self) -> None:
        """Release any connections held by the store."""
        return None
