"""
Contacts API — Contact Route Handlers
=======================================

What:  The five /contacts endpoints.
How:   Each handler pulls the store from the get_store dependency, makes one
       ContactService call, and returns the result. Failures are raised as
       application exceptions and rendered by the global handlers in main.py.

Route Inventory:
    GET    /contacts          → 200 [Contact, ...]
    GET    /contacts/{id}     → 200 Contact | 404 | 500 (malformed id)
    POST   /contacts          → 201 Contact | 400
    PUT    /contacts/{id}     → 200 Contact | 400 | 404
    DELETE /contacts/{id}     → 200 {"message": "Contact deleted"} | 404 | 500
"""

import logging
from typing import Annotated, List

from fastapi import APIRouter, Body, Depends, Path

from contacts_api.database import get_store
from contacts_api.schemas.common import ErrorResponse, MessageResponse
from contacts_api.schemas.contact import ContactCreate, ContactResponse, ContactUpdate
from contacts_api.services.contact_service import contact_service
from contacts_api.storage import DocumentStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/contacts", tags=["Contacts"])

ContactId = Annotated[str, Path(description="Contact identifier (24-character hex ObjectId)")]


@router.get(
    "",
    response_model=List[ContactResponse],
    responses={500: {"description": "Store failure", "model": ErrorResponse}},
    summary="Get all contacts",
    description="Returns every contact in insertion order. An empty store yields [].",
)
async def list_contacts(store: DocumentStore = Depends(get_store)) -> List[ContactResponse]:
    return await contact_service.list_contacts(store)


@router.get(
    "/{contact_id}",
    response_model=ContactResponse,
    responses={
        404: {"description": "Contact not found", "model": ErrorResponse},
        500: {"description": "Malformed id or store failure", "model": ErrorResponse},
    },
    summary="Get a contact by ID",
)
async def get_contact(
    contact_id: ContactId,
    store: DocumentStore = Depends(get_store),
) -> ContactResponse:
    return await contact_service.get_contact(store, contact_id)


@router.post(
    "",
    status_code=201,
    response_model=ContactResponse,
    responses={
        201: {"description": "Contact created"},
        400: {"description": "Missing or invalid field", "model": ErrorResponse},
    },
    summary="Create a new contact",
    description=(
        "All of firstName, lastName, email, favoriteColor and birthday are required. "
        "Returns the stored contact including its generated id."
    ),
)
async def create_contact(
    data: ContactCreate = Body(...),
    store: DocumentStore = Depends(get_store),
) -> ContactResponse:
    return await contact_service.create_contact(store, data)


@router.put(
    "/{contact_id}",
    response_model=ContactResponse,
    responses={
        200: {"description": "Contact updated"},
        400: {"description": "Invalid body, malformed id, or write refused", "model": ErrorResponse},
        404: {"description": "Contact not found", "model": ErrorResponse},
    },
    summary="Update a contact by ID",
    description=(
        "Partial update: only the fields present in the body are changed. "
        "Unknown fields and null values are rejected."
    ),
)
async def update_contact(
    contact_id: ContactId,
    update: ContactUpdate = Body(...),
    store: DocumentStore = Depends(get_store),
) -> ContactResponse:
    return await contact_service.update_contact(store, contact_id, update)


@router.delete(
    "/{contact_id}",
    response_model=MessageResponse,
    responses={
        200: {"description": "Contact deleted"},
        404: {"description": "Contact not found", "model": ErrorResponse},
        500: {"description": "Malformed id or store failure", "model": ErrorResponse},
    },
    summary="Delete a contact by ID",
)
async def delete_contact(
    contact_id: ContactId,
    store: DocumentStore = Depends(get_store),
) -> MessageResponse:
    await contact_service.delete_contact(store, contact_id)
    return MessageResponse(message="Contact deleted")
