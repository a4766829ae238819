"""
Noteful Backend: Notes Route Handlers
======================================

What:  /api/notes CRUD and filtered listing.

Listing filters (all optional, combined with AND):
    GET /api/notes?searchTerm=milk            title or content contains "milk"
    GET /api/notes?folderId=<id>              notes in that folder
    GET /api/notes?tagId=<id>                 notes carrying that tag
    GET /api/notes?searchTerm=milk&tagId=<id> both at once
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.database import get_db_session
from noteful.schemas.common import ErrorResponse, sent_fields
from noteful.schemas.note import NoteResponse, NoteWrite
from noteful.services.note_service import note_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Notes"])

_ERRORS = {
    400: {"description": "Malformed id or reference, or missing title", "model": ErrorResponse},
    404: {"description": "Note not found", "model": ErrorResponse},
}


@router.get(
    "/notes",
    response_model=List[NoteResponse],
    responses={400: _ERRORS[400]},
    summary="List notes, optionally filtered",
)
async def list_notes(
    search_term: Optional[str] = Query(
        default=None,
        alias="searchTerm",
        description="Case-insensitive substring of the title or the content",
    ),
    folder_id: Optional[str] = Query(default=None, alias="folderId"),
    tag_id: Optional[str] = Query(default=None, alias="tagId"),
    db: AsyncSession = Depends(get_db_session),
) -> List[NoteResponse]:
    return await note_service.list_notes(
        db=db,
        search_term=search_term,
        folder_id=folder_id,
        tag_id=tag_id,
    )


@router.get(
    "/notes/{note_id}",
    name="get_note",
    response_model=NoteResponse,
    responses=_ERRORS,
    summary="Get a single note with its tags expanded",
)
async def get_note(note_id: str, db: AsyncSession = Depends(get_db_session)) -> NoteResponse:
    return await note_service.get_note(db=db, note_id=note_id)


@router.post(
    "/notes",
    status_code=201,
    response_model=NoteResponse,
    responses={400: _ERRORS[400]},
    summary="Create a note",
)
async def create_note(
    request: Request,
    response: Response,
    body: Optional[NoteWrite] = None,
    db: AsyncSession = Depends(get_db_session),
) -> NoteResponse:
    note = await note_service.create_note(db=db, payload=sent_fields(body))
    response.headers["Location"] = str(request.url_for("get_note", note_id=note.id))
    return note


@router.put(
    "/notes/{note_id}",
    response_model=NoteResponse,
    responses=_ERRORS,
    summary="Update the fields present in the body",
)
async def update_note(
    note_id: str,
    body: Optional[NoteWrite] = None,
    db: AsyncSession = Depends(get_db_session),
) -> NoteResponse:
    return await note_service.update_note(
        db=db, note_id=note_id, payload=sent_fields(body)
    )


@router.delete(
    "/notes/{note_id}",
    status_code=204,
    response_class=Response,
    responses={400: _ERRORS[400]},
    summary="Delete a note",
)
async def delete_note(note_id: str, db: AsyncSession = Depends(get_db_session)) -> Response:
    await note_service.delete_note(db=db, note_id=note_id)
    return Response(status_code=204)
