"""
Records API - Author Route Handlers
===================================

What:  POST /api/author, GET /api/authors, DELETE /api/author/{author_id}
How:   Thin handlers: extract body/path, delegate to AuthorService, return
       the envelope. Errors propagate to the global exception handlers.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from records_api.database import get_db_session
from records_api.schemas.author import AuthorCreate, AuthorListResponse, AuthorResponse
from records_api.schemas.common import Envelope, ErrorResponse
from records_api.services.author_service import author_service

router = APIRouter(prefix="/api", tags=["Authors"])


@router.post(
    "/author",
    response_model=AuthorResponse,
    responses={
        400: {"description": "Name missing or empty", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create an author",
)
async def create_author(
    payload: Optional[AuthorCreate] = None,
    db: AsyncSession = Depends(get_db_session),
) -> AuthorResponse:
    return await author_service.create_author(db, payload or AuthorCreate())


@router.get(
    "/authors",
    response_model=AuthorListResponse,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List all authors",
)
async def list_authors(db: AsyncSession = Depends(get_db_session)) -> AuthorListResponse:
    return await author_service.list_authors(db)


@router.delete(
    "/author/{author_id}",
    response_model=Envelope,
    responses={
        404: {"description": "Author not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Delete an author and all of their books",
)
async def delete_author(
    author_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> Envelope:
    return await author_service.delete_author(db, author_id)
