"""
Contacts API — Contact Service
================================

What:  Business logic for the five contact operations.
How:   Each method performs exactly one DocumentStore call and translates the
       outcome into a response model or an application exception.
Who:   Called by the /contacts route handlers.

Error translation:
    ┌────────────────┬─────────────────────┬──────────────────────┬────────────────┐
    │ Operation      │ absent              │ InvalidIdentifier    │ WriteRejected  │
    ├────────────────┼─────────────────────┼──────────────────────┼────────────────┤
    │ list           │ n/a                 │ n/a                  │ n/a            │
    │ get            │ NotFoundError (404) │ DatabaseError (500)  │ n/a            │
    │ create         │ n/a                 │ n/a                  │ Validation 400 │
    │ update         │ NotFoundError (404) │ ValidationError (400)│ Validation 400 │
    │ delete         │ NotFoundError (404) │ DatabaseError (500)  │ n/a            │
    └────────────────┴─────────────────────┴──────────────────────┴────────────────┘
    Any other DatabaseError (store unreachable, driver failure) propagates as 500.

ContactService is stateless: the store is passed in on every call, so tests
can hand it an InMemoryDocumentStore or a mock.
"""

import logging
from typing import List

from contacts_api.exceptions import (
    InvalidIdentifierError,
    NotFoundError,
    ValidationError,
    WriteRejectedError,
)
from contacts_api.schemas.contact import ContactCreate, ContactResponse, ContactUpdate
from contacts_api.storage import CONTACTS, DocumentStore

logger = logging.getLogger(__name__)


class ContactService:
    """
    Contact CRUD operations.

    Responsibilities:
        - list_contacts(): every contact in insertion order
        - get_contact(): single contact, NotFoundError when absent
        - create_contact(): insert and return the persisted record
        - update_contact(): partial $set update, returns the updated record
        - delete_contact(): remove, NotFoundError when absent
    """

    async def list_contacts(self, store: DocumentStore) -> List[ContactResponse]:
        documents = await store.find_all(CONTACTS)
        return [ContactResponse.model_validate(doc) for doc in documents]

    async def get_contact(self, store: DocumentStore, contact_id: str) -> ContactResponse:
        """
        Retrieve a single contact by identifier.

        Raises:
            NotFoundError: No contact has this id (→ 404)
            InvalidIdentifierError: id is not a valid ObjectId (→ 500)
            DatabaseError: Store failure (→ 500)
        """
        document = await store.find_by_id(CONTACTS, contact_id)
        if document is None:
            raise NotFoundError(resource="Contact", resource_id=contact_id)
        return ContactResponse.model_validate(document)

    async def create_contact(self, store: DocumentStore, data: ContactCreate) -> ContactResponse:
        """
        Persist a new contact.

        Field presence has already been enforced by ContactCreate; the store
        can still refuse the document (e.g. server-side schema validation).

        Raises:
            ValidationError: The store rejected the document (→ 400)
            DatabaseError: Store failure (→ 500)
        """
        try:
            document = await store.insert(CONTACTS, data.model_dump())
        except WriteRejectedError as e:
            raise ValidationError(message=e.message, context=e.context) from e
        logger.info("Contact created: %s", document["id"])
        return ContactResponse.model_validate(document)

    async def update_contact(
        self, store: DocumentStore, contact_id: str, update: ContactUpdate
    ) -> ContactResponse:
        """
        Overwrite the supplied fields of an existing contact.

        Fields absent from the body are left untouched. The write is a single
        store-level update-by-id.

        Raises:
            NotFoundError: No contact has this id (→ 404)
            ValidationError: Malformed id or write refused by the store (→ 400)
            DatabaseError: Store failure (→ 500)
        """
        changes = update.changes()
        try:
            document = await store.update_by_id(CONTACTS, contact_id, changes)
        except (InvalidIdentifierError, WriteRejectedError) as e:
            raise ValidationError(message=e.message, context=e.context) from e

        if document is None:
            raise NotFoundError(resource="Contact", resource_id=contact_id)

        logger.info("Contact %s updated: fields=%s", contact_id, sorted(changes))
        return ContactResponse.model_validate(document)

    async def delete_contact(self, store: DocumentStore, contact_id: str) -> None:
        """
        Remove a contact.

        Raises:
            NotFoundError: No contact has this id (→ 404)
            InvalidIdentifierError: id is not a valid ObjectId (→ 500)
            DatabaseError: Store failure (→ 500)
        """
        deleted = await store.delete_by_id(CONTACTS, contact_id)
        if not deleted:
            raise NotFoundError(resource="Contact", resource_id=contact_id)
        logger.info("Contact deleted: %s", contact_id)


contact_service = ContactService()
