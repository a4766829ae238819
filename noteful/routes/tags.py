"""
Noteful Backend: Tag Route Handlers
====================================

What:  /api/tags CRUD. Same shape and validation as folders; deleting a tag
       also pulls its id out of every note (see services/tag_service.py).
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.database import get_db_session
from noteful.schemas.common import ErrorResponse, sent_fields
from noteful.schemas.tag import TagResponse, TagWrite
from noteful.services.tag_service import tag_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Tags"])

_ERRORS = {
    400: {"description": "Malformed id, missing name or duplicate name", "model": ErrorResponse},
    404: {"description": "Tag not found", "model": ErrorResponse},
}


@router.get(
    "/tags",
    response_model=List[TagResponse],
    summary="List tags alphabetically",
)
async def list_tags(db: AsyncSession = Depends(get_db_session)) -> List[TagResponse]:
    return await tag_service.list_all(db)


@router.get(
    "/tags/{tag_id}",
    name="get_tag",
    response_model=TagResponse,
    responses=_ERRORS,
    summary="Get a single tag by id",
)
async def get_tag(tag_id: str, db: AsyncSession = Depends(get_db_session)) -> TagResponse:
    return await tag_service.get_by_id(db, tag_id)


@router.post(
    "/tags",
    status_code=201,
    response_model=TagResponse,
    responses={400: _ERRORS[400]},
    summary="Create a tag",
)
async def create_tag(
    request: Request,
    response: Response,
    body: Optional[TagWrite] = None,
    db: AsyncSession = Depends(get_db_session),
) -> TagResponse:
    tag = await tag_service.create(db, sent_fields(body))
    response.headers["Location"] = str(request.url_for("get_tag", tag_id=tag.id))
    return tag


@router.put(
    "/tags/{tag_id}",
    response_model=TagResponse,
    responses=_ERRORS,
    summary="Rename a tag",
)
async def update_tag(
    tag_id: str,
    body: Optional[TagWrite] = None,
    db: AsyncSession = Depends(get_db_session),
) -> TagResponse:
    return await tag_service.update(db, tag_id, sent_fields(body))


@router.delete(
    "/tags/{tag_id}",
    status_code=204,
    response_class=Response,
    responses={400: _ERRORS[400]},
    summary="Delete a tag and remove it from every note",
)
async def delete_tag(tag_id: str) -> Response:
    """
    Waits for both the tag delete and the note cleanup. If either fails the
    error is returned, and whatever the other one did stays done.
    """
    await tag_service.delete(tag_id)
    return Response(status_code=204)
