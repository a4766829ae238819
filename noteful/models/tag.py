"""
Noteful Backend: Tag SQLAlchemy Model
======================================

What:  ORM model for the `tags` table.

Same uniqueness discipline as folders: `name` carries a UNIQUE constraint.
Notes hold tag ids in an array column, not a join table, so there is no
foreign key to enforce; tag deletion pulls the id from notes explicitly.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from noteful.database import Base
from noteful.models.common import IdentifiedMixin


class Tag(IdentifiedMixin, Base):
    __tablename__ = "tags"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        comment="Tag label, unique across tags",
    )

    def __repr__(self) -> str:
        return f"<Tag(id={self.id}, name='{self.name}')>"
