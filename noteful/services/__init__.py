# Services package init
"""
Noteful Backend: Services Package
==================================

What:  Business logic, independent of HTTP.

Service Inventory:
    - filters.py:        NoteFilter → SQLAlchemy criteria for GET /api/notes
    - cascade.py:        concurrent paired writes, joined failure
    - conflicts.py:      unique-constraint violation → ConflictError
    - folder_service.py: folder CRUD, folder delete cascade
    - tag_service.py:    tag CRUD, tag delete cascade
    - note_service.py:   note CRUD, filtered listing, tag expansion
"""
