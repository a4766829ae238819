"""Tag request/response contracts."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from noteful.schemas.common import CamelModel


class TagResponse(CamelModel):
    id: str = Field(description="24-character hexadecimal identifier")
    name: str
    created_at: datetime
    updated_at: datetime


class TagWrite(CamelModel):
    """Body of POST and PUT /api/tags. See FolderWrite for why `name` is optional."""
    name: Optional[str] = None
