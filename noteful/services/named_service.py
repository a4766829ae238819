"""
Noteful Backend: Named-Entity Service Base
===========================================

What:  Shared CRUD for entities that are just a unique `name` plus
       timestamps (folders and tags).
How:   Generic over the ORM model; subclasses set the model, the entity
       label used in messages, the list ordering and the response schema,
       and implement their own delete cascade.

Validation order for every operation:
    1. identifier well-formed      → ValidationError (400)
    2. required `name` present     → ValidationError (400)
    3. storage call
         - no row                  → NotFoundError (404)
         - unique name violation   → ConflictError (400)
         - anything else           → propagated unchanged (500)
"""

import logging
from typing import Any, Dict, Generic, List, Sequence, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import ColumnElement, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from noteful.database import Base, async_session_factory
from noteful.exceptions import NotFoundError
from noteful.services.conflicts import translate_unique_violation
from noteful.validators import ensure_present, ensure_valid_id

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)
ResponseType = TypeVar("ResponseType", bound=BaseModel)


class NamedEntityService(Generic[ModelType, ResponseType]):
    """
    Subclasses set:

        model:           the ORM class
        entity:          lowercase label ("folder", "tag")
        response_schema: Pydantic response model
    and implement `list_ordering()` and `delete()`.
    """

    model: Type[ModelType]
    entity: str
    response_schema: Type[ResponseType]

    def __init__(self, session_factory: async_sessionmaker = async_session_factory) -> None:
        # Cascading deletes open their own sessions; everything else uses
        # the request session passed in by the route.
        self.session_factory = session_factory

    def list_ordering(self) -> Sequence[ColumnElement[Any]]:
        raise NotImplementedError

    async def list_all(self, db: AsyncSession) -> List[ResponseType]:
        result = await db.execute(select(self.model).order_by(*self.list_ordering()))
        return [self.response_schema.model_validate(row) for row in result.scalars().all()]

    async def get_by_id(self, db: AsyncSession, entity_id: str) -> ResponseType:
        entity_id = ensure_valid_id(entity_id)
        instance = await self._get_or_404(db, entity_id)
        return self.response_schema.model_validate(instance)

    async def create(self, db: AsyncSession, payload: Dict[str, Any]) -> ResponseType:
        ensure_present(payload, "name")

        instance = self.model(name=payload["name"])
        db.add(instance)
        with translate_unique_violation(self.entity):
            await db.flush()

        logger.info("Created %s %s (%r)", self.entity, instance.id, instance.name)
        return self.response_schema.model_validate(instance)

    async def update(
        self, db: AsyncSession, entity_id: str, payload: Dict[str, Any]
    ) -> ResponseType:
        entity_id = ensure_valid_id(entity_id)
        ensure_present(payload, "name")

        instance = await self._get_or_404(db, entity_id)
        instance.name = payload["name"]
        with translate_unique_violation(self.entity):
            await db.flush()

        logger.info("Renamed %s %s to %r", self.entity, entity_id, instance.name)
        return self.response_schema.model_validate(instance)

    async def delete(self, entity_id: str) -> None:
        raise NotImplementedError

    async def _get_or_404(self, db: AsyncSession, entity_id: str) -> ModelType:
        result = await db.execute(select(self.model).where(self.model.id == entity_id))
        instance = result.scalar_one_or_none()
        if instance is None:
            raise NotFoundError(resource=self.entity, resource_id=entity_id)
        return instance
