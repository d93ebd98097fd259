"""
Contacts API — Contact Request/Response Schemas
=================================================

What:  Pydantic models defining the contact API contract.
How:   FastAPI validates request bodies against these models, serializes
       responses through them, and generates the /api-docs schema from them.

Field names are camelCase on the wire and in the store; they are the
contract existing clients already use.
"""

from datetime import date
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

CONTACT_EXAMPLE = {
    "firstName": "Victor",
    "lastName": "Boluwatife",
    "email": "victor@example.com",
    "favoriteColor": "Blue",
    "birthday": "2000-01-01",
}

# Fields a client may set. Anything else in a PUT body is rejected.
MUTABLE_FIELDS = ("firstName", "lastName", "email", "favoriteColor", "birthday")


class ContactCreate(BaseModel):
    """
    Body of POST /contacts.

    All five fields are required. Email and birthday are free-form strings:
    no format or date validation is performed.
    """
    firstName: str = Field(min_length=1, description="Given name (non-empty)")
    lastName: str = Field(min_length=1, description="Family name (non-empty)")
    email: str = Field(description="Email address (not format-checked)")
    favoriteColor: str = Field(description="Favorite color")
    birthday: str = Field(description="Birthday, free-form (e.g. 2000-01-01)")

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={"examples": [CONTACT_EXAMPLE]},
    )


class ContactUpdate(BaseModel):
    """
    Body of PUT /contacts/{id}: a partial update.

    Only fields present in the body are written; the rest of the stored record
    is left unchanged. Unknown fields and explicit nulls are rejected.
    """
    firstName: Optional[str] = Field(default=None, min_length=1)
    lastName: Optional[str] = Field(default=None, min_length=1)
    email: Optional[str] = None
    favoriteColor: Optional[str] = None
    birthday: Optional[str] = None

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={"examples": [{"favoriteColor": "Green"}]},
    )

    @model_validator(mode="before")
    @classmethod
    def reject_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            nulls = sorted(k for k, v in data.items() if v is None and k in MUTABLE_FIELDS)
            if nulls:
                raise ValueError(f"Field(s) cannot be null: {', '.join(nulls)}")
        return data

    def changes(self) -> Dict[str, str]:
        """Fields the client actually sent, ready for the store's $set."""
        return self.model_dump(exclude_unset=True)


class ContactResponse(BaseModel):
    """A persisted contact as returned by every contact endpoint."""
    id: str = Field(description="Store-assigned identifier")
    # Optional on the way out: records written outside this API may be partial.
    firstName: Optional[str] = None
    lastName: Optional[str] = None
    email: Optional[str] = None
    favoriteColor: Optional[str] = None
    birthday: Optional[str] = None

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={"examples": [{"id": "6650c7a1f1d2c3b4a5e6f7a8", **CONTACT_EXAMPLE}]},
    )

    @field_validator(*MUTABLE_FIELDS, mode="before")
    @classmethod
    def stringify_stored_values(cls, value: Any) -> Any:
        """Render non-string scalars (numbers, BSON dates) stored by other writers as text."""
        if isinstance(value, date):
            return value.isoformat()
        if isinstance(value, (int, float)):
            return str(value)
        return value
