"""
Contacts API — Services Layer
===============================

What:  Logic sitting between routes (HTTP) and the document store.

Service Inventory:
    - ContactService: contact CRUD, store failures → error taxonomy
    - ProfessionalService: first stored profile or the fallback literal

Routes stay thin: they pick the status code and response model, services
decide what an absent record or a failed store call means.
"""
