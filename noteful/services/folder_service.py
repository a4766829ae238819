"""
Noteful Backend: Folder Service
================================

What:  Folder CRUD plus the folder delete cascade.

Delete cascade:
    (a) DELETE FROM folders WHERE id = :id
    (b) UPDATE notes SET folder_id = NULL WHERE folder_id = :id
    Run concurrently through the cascade coordinator; see cascade.py for
    the failure semantics.
"""

import logging

from sqlalchemy import delete, update
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.models.folder import Folder
from noteful.models.note import Note
from noteful.schemas.folder import FolderResponse
from noteful.services.cascade import run_concurrently
from noteful.services.named_service import NamedEntityService
from noteful.validators import ensure_valid_id

logger = logging.getLogger(__name__)


class FolderService(NamedEntityService[Folder, FolderResponse]):
    model = Folder
    entity = "folder"
    response_schema = FolderResponse

    def list_ordering(self):
        return (Folder.updated_at.desc(), Folder.id.desc())

    async def delete(self, entity_id: str) -> None:
        entity_id = ensure_valid_id(entity_id)

        async def delete_folder(session: AsyncSession) -> int:
            result = await session.execute(delete(Folder).where(Folder.id == entity_id))
            return result.rowcount

        async def detach_notes(session: AsyncSession) -> int:
            result = await session.execute(
                update(Note)
                .where(Note.folder_id == entity_id)
                .values(folder_id=None)
                .execution_options(synchronize_session=False)
            )
            return result.rowcount

        deleted, detached = await run_concurrently(
            self.session_factory, delete_folder, detach_notes
        )
        logger.info(
            "Deleted folder %s (rows=%s), detached %s notes", entity_id, deleted, detached
        )


folder_service = FolderService()
