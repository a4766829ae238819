# Routes package init
"""
Noteful Backend: API Routes Package
====================================

Route Inventory:
    - folders.py: GET/POST /api/folders, GET/PUT/DELETE /api/folders/{id}
    - notes.py:   GET/POST /api/notes,   GET/PUT/DELETE /api/notes/{id}
    - tags.py:    GET/POST /api/tags,    GET/PUT/DELETE /api/tags/{id}
    - health.py:  GET /health

Routes stay thin: read path/query/body, call the service, set status code
and Location header. Identifiers arrive as plain strings; services check
their shape so a malformed id yields 400 rather than a routing 404/422.
"""
