"""
Noteful Backend: Tag Service
=============================

What:  Tag CRUD plus the tag delete cascade.

Delete cascade:
    (a) DELETE FROM tags WHERE id = :id
    (b) UPDATE notes SET tags = array_remove(tags, :id) WHERE :id = ANY(tags)

    Both are issued concurrently, each in its own transaction, and the
    request waits for both. The cascade is best effort: there is no
    rollback if only one of them succeeds. Afterwards no note lists the
    tag id, and the number of notes is unchanged.
"""

import logging

from sqlalchemy import any_, delete, func, literal, update
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.models.note import Note
from noteful.models.tag import Tag
from noteful.schemas.tag import TagResponse
from noteful.services.cascade import run_concurrently
from noteful.services.named_service import NamedEntityService
from noteful.validators import ensure_valid_id

logger = logging.getLogger(__name__)


class TagService(NamedEntityService[Tag, TagResponse]):
    model = Tag
    entity = "tag"
    response_schema = TagResponse

    def list_ordering(self):
        # Case-insensitive alphabetical, id breaks ties between equal names
        return (func.lower(Tag.name).asc(), Tag.id.asc())

    async def delete(self, entity_id: str) -> None:
        entity_id = ensure_valid_id(entity_id)

        async def delete_tag(session: AsyncSession) -> int:
            result = await session.execute(delete(Tag).where(Tag.id == entity_id))
            return result.rowcount

        async def pull_from_notes(session: AsyncSession) -> int:
            result = await session.execute(
                update(Note)
                .where(literal(entity_id) == any_(Note.tags))
                .values(tags=func.array_remove(Note.tags, entity_id))
                .execution_options(synchronize_session=False)
            )
            return result.rowcount

        deleted, pulled = await run_concurrently(
            self.session_factory, delete_tag, pull_from_notes
        )
        logger.info("Deleted tag %s (rows=%s), pulled from %s notes", entity_id, deleted, pulled)


tag_service = TagService()
