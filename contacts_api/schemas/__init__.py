"""
Contacts API — Schemas Package
================================

Pydantic models forming the public API contract. They are kept separate from
the stored document shape so that the store can hold extra fields without
leaking them to clients.
"""
