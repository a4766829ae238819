"""
Noteful Backend: Note SQLAlchemy Model
=======================================

What:  ORM model representing the `notes` table in PostgreSQL.
How:   Inherits id and timestamps from IdentifiedMixin.

Table Design:
    - title: required, TEXT
    - content: nullable TEXT; NULL when the note was created without content
    - folder_id: nullable weak reference to folders.id (no foreign key)
    - tags: nullable VARCHAR(24)[] of tag ids, in the order the client sent
      them. NULL and an empty array are distinct states: a note created
      without tags stores NULL; pulling the last tag off a note leaves [].

Query Patterns:
    - List/filter: WHERE ... ORDER BY updated_at DESC, id DESC
      → idx_notes_updated_at
    - Notes in a folder: WHERE folder_id = :id → idx_notes_folder_id
    - Notes carrying a tag: WHERE :id = ANY(tags) → GIN index on tags
"""

from typing import List, Optional

from sqlalchemy import Index, String, Text
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, mapped_column

from noteful.database import Base
from noteful.models.common import IdentifiedMixin


class Note(IdentifiedMixin, Base):
    __tablename__ = "notes"

    title: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    content: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        default=None,
    )

    folder_id: Mapped[Optional[str]] = mapped_column(
        String(24),
        nullable=True,
        default=None,
        comment="Weak reference to folders.id",
    )

    tags: Mapped[Optional[List[str]]] = mapped_column(
        ARRAY(String(24)),
        nullable=True,
        default=None,
        comment="Ordered weak references to tags.id",
    )

    __table_args__ = (
        Index("idx_notes_updated_at", "updated_at"),
        Index("idx_notes_folder_id", "folder_id"),
        Index("idx_notes_tags", "tags", postgresql_using="gin"),
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title='{self.title}', folder_id={self.folder_id})>"
