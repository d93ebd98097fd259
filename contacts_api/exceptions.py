"""
Contacts API — Custom Exception Hierarchy
===========================================

What:  Application-specific exceptions for each failure the API can report.
How:   Each exception carries a user-facing message and an optional context
       dict. Global exception handlers (registered in main.py) map them to
       HTTP status codes and a `{"message": ...}` JSON body.
Who:   Raised by the storage layer and services; caught by global handlers.

Exception Hierarchy:
    ContactsAPIError (base)
    ├── ValidationError              → 400 Bad Request
    ├── NotFoundError                → 404 Not Found
    └── DatabaseError                → 500 Internal Server Error
        ├── InvalidIdentifierError   → 500 on read/delete, 400 on update
        └── WriteRejectedError       → translated to 400 by services

The storage layer only ever raises DatabaseError and its subclasses. Services
decide which of those a caller should see as a client error.
"""

from typing import Any, Dict, Optional


class ContactsAPIError(Exception):
    """
    Base exception for all Contacts API errors.

    Attributes:
        message:  User-facing error description (returned in the API response)
        context:  Additional debug info (logged, never returned to the client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(ContactsAPIError):
    """
    Raised when client input cannot be accepted.

    When:    Missing required field, wrong type, unknown update field, or a
             write the store refused.
    HTTP:    400 Bad Request

    Example response:
        {"message": "Missing required field(s): email", "request_id": "a1b2c3d4"}
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(ContactsAPIError):
    """
    Raised when no record exists for the given identifier.

    When:    GET/PUT/DELETE /contacts/{id} with an id that matches nothing.
    HTTP:    404 Not Found

    The store returns None (or False) for missing records; services convert
    that into this exception so routes never branch on absence.
    """

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class DatabaseError(ContactsAPIError):
    """
    Raised when a document store operation fails.

    When:    Store unreachable, server selection timed out, driver error.
    HTTP:    500 Internal Server Error

    The message is the underlying driver message so that callers can see
    what went wrong; the collection and operation are kept in context.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class InvalidIdentifierError(DatabaseError):
    """
    Raised when an identifier is malformed for the store's addressing scheme.

    What:    The id is not a 24-character hex ObjectId string.
    HTTP:    500 on GET/DELETE (no distinct "bad id" status), 400 on PUT
    """

    def __init__(
        self,
        identifier: str,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["identifier"] = identifier
        super().__init__(
            message=message
            or (
                f"'{identifier}' is not a valid ObjectId, it must be a 12-byte input "
                "or a 24-character hex string"
            ),
            context=ctx,
        )
        self.identifier = identifier


class WriteRejectedError(DatabaseError):
    """
    Raised when the store refuses an insert or update.

    What:    Document validation failure, duplicate key, bad update operator.
    HTTP:    400 once translated by the service layer
    """

    def __init__(
        self,
        message: str = "The store rejected the write",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
