"""
Noteful Backend: Note Filter Builder
=====================================

What:  Maps optional listing criteria to SQLAlchemy predicates.
How:   NoteFilter is an immutable value built fresh for each request;
       build_note_criteria turns it into a list of independent clauses that
       are ANDed together by build_notes_query.

Criteria:
    search_term → title ILIKE %term% OR content ILIKE %term%
    folder_id   → folder_id = :folder_id
    tag_id      → :tag_id = ANY(tags)

Each criterion is optional and independent; an absent one adds no clause.
Ordering is updated_at DESC with the id as a deterministic tie-break.
"""

from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy import ColumnElement, Select, any_, literal, or_, select

from noteful.models.note import Note

LIKE_ESCAPE = "\\"


@dataclass(frozen=True)
class NoteFilter:
    search_term: Optional[str] = None
    folder_id: Optional[str] = None
    tag_id: Optional[str] = None


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so the term matches as a literal substring."""
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def build_note_criteria(filters: NoteFilter) -> List[ColumnElement[bool]]:
    criteria: List[ColumnElement[bool]] = []

    if filters.search_term:
        pattern = f"%{escape_like(filters.search_term)}%"
        criteria.append(
            or_(
                Note.title.ilike(pattern, escape=LIKE_ESCAPE),
                Note.content.ilike(pattern, escape=LIKE_ESCAPE),
            )
        )

    if filters.folder_id:
        criteria.append(Note.folder_id == filters.folder_id)

    if filters.tag_id:
        criteria.append(literal(filters.tag_id) == any_(Note.tags))

    return criteria


def build_notes_query(filters: NoteFilter) -> Select:
    """SELECT notes matching every supplied criterion, newest update first."""
    return (
        select(Note)
        .where(*build_note_criteria(filters))
        .order_by(Note.updated_at.desc(), Note.id.desc())
    )
