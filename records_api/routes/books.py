"""
Records API - Book Route Handlers
=================================

What:  POST /api/book, GET /api/books, DELETE /api/book/{book_id}
The listing returns each book's authorId expanded to {"name": ...}.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from records_api.database import get_db_session
from records_api.schemas.book import BookCreate, BookListResponse, BookResponse
from records_api.schemas.common import Envelope, ErrorResponse
from records_api.services.book_service import book_service

router = APIRouter(prefix="/api", tags=["Books"])


@router.post(
    "/book",
    response_model=BookResponse,
    responses={
        400: {"description": "title or authorId missing, empty or malformed", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a book",
)
async def create_book(
    payload: Optional[BookCreate] = None,
    db: AsyncSession = Depends(get_db_session),
) -> BookResponse:
    return await book_service.create_book(db, payload or BookCreate())


@router.get(
    "/books",
    response_model=BookListResponse,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List all books with their author's name",
)
async def list_books(db: AsyncSession = Depends(get_db_session)) -> BookListResponse:
    return await book_service.list_books(db)


@router.delete(
    "/book/{book_id}",
    response_model=Envelope,
    responses={
        404: {"description": "Book not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Delete a book",
)
async def delete_book(
    book_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> Envelope:
    return await book_service.delete_book(db, book_id)
