"""ORM models. Importing this package registers every table with Base.metadata."""

from noteful.models.folder import Folder
from noteful.models.note import Note
from noteful.models.tag import Tag

__all__ = ["Folder", "Note", "Tag"]
