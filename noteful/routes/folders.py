"""
Noteful Backend: Folder Route Handlers
=======================================

What:  /api/folders CRUD.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.database import get_db_session
from noteful.schemas.common import ErrorResponse, sent_fields
from noteful.schemas.folder import FolderResponse, FolderWrite
from noteful.services.folder_service import folder_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Folders"])

_ERRORS = {
    400: {"description": "Malformed id, missing name or duplicate name", "model": ErrorResponse},
    404: {"description": "Folder not found", "model": ErrorResponse},
}


@router.get(
    "/folders",
    response_model=List[FolderResponse],
    summary="List folders, most recently updated first",
)
async def list_folders(db: AsyncSession = Depends(get_db_session)) -> List[FolderResponse]:
    return await folder_service.list_all(db)


@router.get(
    "/folders/{folder_id}",
    name="get_folder",
    response_model=FolderResponse,
    responses=_ERRORS,
    summary="Get a single folder by id",
)
async def get_folder(
    folder_id: str, db: AsyncSession = Depends(get_db_session)
) -> FolderResponse:
    return await folder_service.get_by_id(db, folder_id)


@router.post(
    "/folders",
    status_code=201,
    response_model=FolderResponse,
    responses={400: _ERRORS[400]},
    summary="Create a folder",
)
async def create_folder(
    request: Request,
    response: Response,
    body: Optional[FolderWrite] = None,
    db: AsyncSession = Depends(get_db_session),
) -> FolderResponse:
    folder = await folder_service.create(db, sent_fields(body))
    response.headers["Location"] = str(request.url_for("get_folder", folder_id=folder.id))
    return folder


@router.put(
    "/folders/{folder_id}",
    response_model=FolderResponse,
    responses=_ERRORS,
    summary="Rename a folder",
)
async def update_folder(
    folder_id: str,
    body: Optional[FolderWrite] = None,
    db: AsyncSession = Depends(get_db_session),
) -> FolderResponse:
    return await folder_service.update(db, folder_id, sent_fields(body))


@router.delete(
    "/folders/{folder_id}",
    status_code=204,
    response_class=Response,
    responses={400: _ERRORS[400]},
    summary="Delete a folder and detach its notes",
)
async def delete_folder(folder_id: str) -> Response:
    await folder_service.delete(folder_id)
    return Response(status_code=204)
