"""Folder request/response contracts."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from noteful.schemas.common import CamelModel


class FolderResponse(CamelModel):
    id: str = Field(description="24-character hexadecimal identifier")
    name: str
    created_at: datetime
    updated_at: datetime


class FolderWrite(CamelModel):
    """
    Body of POST and PUT /api/folders.

    `name` is optional at the schema level so that a missing name is
    reported as "Missing `name` in request body" by the service instead of
    a generic schema error.
    """
    name: Optional[str] = None
