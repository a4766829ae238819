"""
Noteful Backend: Note Service
==============================

What:  Note CRUD, filtered listing and tag expansion.
Who:   Called by the /api/notes route handlers.

Validation (always before any storage call):
    create: title present → folderId well-formed → every tag id well-formed
    update: id well-formed → folderId → tag ids → title present

Write semantics:
    create: absent/empty content and folderId are stored as NULL; an absent
            tag list is stored as NULL, an explicit [] is kept.
    update: only keys the client sent are touched (partial update).

References are checked for shape only. A note may point at a folder or
tag that does not exist; tag expansion silently drops such ids.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.exceptions import NotFoundError
from noteful.models.note import Note
from noteful.models.tag import Tag
from noteful.schemas.note import NoteResponse
from noteful.schemas.tag import TagResponse
from noteful.services.filters import NoteFilter, build_notes_query
from noteful.validators import (
    INVALID_FOLDER_ID_MESSAGE,
    INVALID_TAG_ID_MESSAGE,
    ensure_present,
    ensure_valid_id,
    ensure_valid_ids,
)

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "content", "folder_id", "tags")


class NoteService:
    """
    Stateless business logic for notes. Receives the request session on
    every call.
    """

    async def list_notes(
        self,
        db: AsyncSession,
        search_term: Optional[str] = None,
        folder_id: Optional[str] = None,
        tag_id: Optional[str] = None,
    ) -> List[NoteResponse]:
        """
        List notes matching every supplied criterion, newest update first.

        Empty query parameters are treated as absent. A supplied folderId
        or tagId must be well-formed.
        """
        if folder_id:
            folder_id = ensure_valid_id(
                folder_id, message=INVALID_FOLDER_ID_MESSAGE, field="folderId"
            )
        if tag_id:
            tag_id = ensure_valid_id(tag_id, message=INVALID_TAG_ID_MESSAGE, field="tagId")

        filters = NoteFilter(
            search_term=search_term or None,
            folder_id=folder_id or None,
            tag_id=tag_id or None,
        )
        result = await db.execute(build_notes_query(filters))
        notes = list(result.scalars().all())
        return await self._expand(db, notes)

    async def get_note(self, db: AsyncSession, note_id: str) -> NoteResponse:
        note_id = ensure_valid_id(note_id)
        note = await self._get_or_404(db, note_id)
        return (await self._expand(db, [note]))[0]

    async def create_note(self, db: AsyncSession, payload: Dict[str, Any]) -> NoteResponse:
        ensure_present(payload, "title")
        payload = self._normalize_references(payload)

        note = Note(
            title=payload["title"],
            content=payload.get("content") or None,
            folder_id=payload.get("folder_id") or None,
            tags=payload.get("tags"),
        )
        db.add(note)
        await db.flush()

        logger.info("Created note %s", note.id)
        return (await self._expand(db, [note]))[0]

    async def update_note(
        self, db: AsyncSession, note_id: str, payload: Dict[str, Any]
    ) -> NoteResponse:
        """
        Partial update: every key in `payload` is written, nothing else.

        `payload` is the request body dumped with exclude_unset=True, so a
        key is present only if the client sent it. `title` is required on
        update as well.
        """
        note_id = ensure_valid_id(note_id)
        payload = self._normalize_references(payload)
        ensure_present(payload, "title")

        note = await self._get_or_404(db, note_id)
        for field in UPDATABLE_FIELDS:
            if field in payload:
                value = payload[field]
                if field == "folder_id" and not value:
                    value = None
                setattr(note, field, value)
        await db.flush()

        changed = sorted(k for k in payload if k in UPDATABLE_FIELDS)
        logger.info("Updated note %s fields=%s", note_id, changed)
        return (await self._expand(db, [note]))[0]

    async def delete_note(self, db: AsyncSession, note_id: str) -> None:
        """Delete by id. Deleting an absent note is not an error."""
        note_id = ensure_valid_id(note_id)
        result = await db.execute(delete(Note).where(Note.id == note_id))
        logger.info("Deleted note %s (rows=%s)", note_id, result.rowcount)

    # ── Helpers ───────────────────────────────────────────────────────────

    @staticmethod
    def _normalize_references(payload: Dict[str, Any]) -> Dict[str, Any]:
        """Validate folderId and tag ids; return a copy holding their lowercase form."""
        payload = dict(payload)
        if payload.get("folder_id"):
            payload["folder_id"] = ensure_valid_id(
                payload["folder_id"], message=INVALID_FOLDER_ID_MESSAGE, field="folderId"
            )
        if payload.get("tags"):
            payload["tags"] = ensure_valid_ids(payload["tags"])
        return payload

    async def _get_or_404(self, db: AsyncSession, note_id: str) -> Note:
        result = await db.execute(select(Note).where(Note.id == note_id))
        note = result.scalar_one_or_none()
        if note is None:
            raise NotFoundError(resource="note", resource_id=note_id)
        return note

    async def _expand(self, db: AsyncSession, notes: Iterable[Note]) -> List[NoteResponse]:
        """
        Build responses with tag ids replaced by tag objects.

        One query loads every referenced tag for the whole batch. Ids with
        no matching tag are dropped; stored order is kept.
        """
        notes = list(notes)
        tag_ids = {tag_id for note in notes for tag_id in (note.tags or [])}

        tags_by_id: Dict[str, TagResponse] = {}
        if tag_ids:
            result = await db.execute(select(Tag).where(Tag.id.in_(tag_ids)))
            tags_by_id = {
                tag.id: TagResponse.model_validate(tag) for tag in result.scalars().all()
            }

        return [self._to_response(note, tags_by_id) for note in notes]

    @staticmethod
    def _to_response(note: Note, tags_by_id: Dict[str, TagResponse]) -> NoteResponse:
        tags = None
        if note.tags is not None:
            tags = [tags_by_id[tag_id] for tag_id in note.tags if tag_id in tags_by_id]

        return NoteResponse(
            id=note.id,
            title=note.title,
            content=note.content,
            folder_id=note.folder_id,
            tags=tags,
            created_at=note.created_at,
            updated_at=note.updated_at,
        )


note_service = NoteService()
