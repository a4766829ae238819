"""
Noteful Backend: Note Request/Response Schemas
===============================================

What:  API contract for notes.

Response shape:
    {
        "id": "5c1b8d2e0a1f3e4d5c6b7a89",
        "title": "Groceries",
        "content": null,
        "folderId": null,
        "tags": [{"id": "...", "name": "errands", "createdAt": ..., "updatedAt": ...}],
        "createdAt": "2026-10-18T09:12:44Z",
        "updatedAt": "2026-10-18T09:12:44Z"
    }

    `tags` is always expanded to embedded tag objects, in stored order.
    A note stored without a tag list returns `"tags": null`.

Request shape:
    NoteWrite is used for both POST and PUT. Every field is optional at the
    schema level; which keys the client actually sent is read back with
    `model_dump(exclude_unset=True)` to drive partial updates.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from noteful.schemas.common import CamelModel
from noteful.schemas.tag import TagResponse


class NoteResponse(CamelModel):
    id: str = Field(description="24-character hexadecimal identifier")
    title: str
    content: Optional[str] = None
    folder_id: Optional[str] = Field(default=None, description="Owning folder id, if any")
    tags: Optional[List[TagResponse]] = Field(
        default=None,
        description="Tags attached to the note, expanded, in stored order",
    )
    created_at: datetime
    updated_at: datetime


class NoteWrite(CamelModel):
    title: Optional[str] = None
    content: Optional[str] = None
    folder_id: Optional[str] = None
    tags: Optional[List[str]] = None
