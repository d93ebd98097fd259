"""
Contacts API — Application Package Initializer
================================================

What: Marks the `contacts_api` directory as a Python package.
Who:  Used by uvicorn (`contacts_api.main:app`), pytest, and the console script.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │     Services (Error Translation)    │  ← store result → response / taxonomy
    ├─────────────────────────────────────┤
    │         Schemas (API Contract)      │  ← Pydantic models, drive /api-docs
    ├─────────────────────────────────────┤
    │   Storage (DocumentStore interface) │  ← MongoDB or in-memory
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
