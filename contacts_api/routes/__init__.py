"""
Contacts API — API Routes Package
===================================

Route Inventory:
    - contacts.py:      GET/POST /contacts, GET/PUT/DELETE /contacts/{id}
    - professional.py:  GET /professional
    - health.py:        GET /  (banner)
                        GET /health

Interactive documentation is served by FastAPI itself at /api-docs.
"""
