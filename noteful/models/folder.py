"""
Noteful Backend: Folder SQLAlchemy Model
=========================================

What:  ORM model for the `folders` table.

Table Design:
    - name is UNIQUE at the storage level; a duplicate insert/update raises
      IntegrityError (SQLSTATE 23505), translated to a 400 by the service.
    - Notes point at folders through notes.folder_id without a foreign key,
      so deleting a folder never fails because of notes; the folder
      service clears those references itself.
"""

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column

from noteful.database import Base
from noteful.models.common import IdentifiedMixin


class Folder(IdentifiedMixin, Base):
    __tablename__ = "folders"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        comment="Folder display name, unique across folders",
    )

    __table_args__ = (
        Index("idx_folders_updated_at", "updated_at"),
    )

    def __repr__(self) -> str:
        return f"<Folder(id={self.id}, name='{self.name}')>"
