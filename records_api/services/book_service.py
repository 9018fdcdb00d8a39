"""
Records API - Book Service
==========================

What:  Create, list and delete books.

Reference expansion (GET /api/books):
    Books store only the author id. The listing replaces it with the
    author's name, loaded with one extra query:

        SELECT * FROM books ORDER BY created_at
        SELECT id, name FROM authors WHERE id IN (:author_ids)

    Only the name column is selected, so no other author field can leak
    into the response. A book whose author no longer exists is listed with
    authorId = null.
"""

import logging
import uuid
from typing import Dict

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from records_api.exceptions import ValidationError
from records_api.models.author import Author
from records_api.models.book import Book
from records_api.schemas.book import (
    BookCreate,
    BookListItem,
    BookListResponse,
    BookOut,
    BookResponse,
)
from records_api.schemas.common import Envelope, NameRef
from records_api.services.base import RecordService, is_blank, parse_record_id, store_errors

logger = logging.getLogger(__name__)


class BookService(RecordService):
    model = Book
    resource = "Book"

    async def create_book(self, db: AsyncSession, payload: BookCreate) -> BookResponse:
        """
        Insert a new book.

        The author is not looked up: any well-formed identifier is accepted.

        Raises:
            ValidationError: title or authorId missing/empty, or authorId
                             not a valid identifier (→ 400)
            DatabaseError: insert failed (→ 500)
        """
        if is_blank(payload.title) or is_blank(payload.author_id):
            raise ValidationError(message="title and author are required")

        author_id = parse_record_id(payload.author_id)
        if author_id is None:
            raise ValidationError(
                message="authorId must be a valid identifier", field="authorId"
            )

        with store_errors("create_book"):
            book = Book(id=uuid.uuid4(), title=payload.title.strip(), author_id=author_id)
            db.add(book)
            await db.flush()
            logger.info("Book created: %s (author %s)", book.id, author_id)

            return BookResponse(
                msg="Book created successfully",
                data=BookOut(id=book.id, title=book.title, author_id=book.author_id),
            )

    async def list_books(self, db: AsyncSession) -> BookListResponse:
        with store_errors("list_books"):
            result = await db.execute(select(Book).order_by(Book.created_at, Book.id))
            books = list(result.scalars().all())

            names: Dict[uuid.UUID, str] = {}
            author_ids = {book.author_id for book in books}
            if author_ids:
                author_rows = await db.execute(
                    select(Author.id, Author.name).where(Author.id.in_(author_ids))
                )
                names = {row.id: row.name for row in author_rows}

            count_result = await db.execute(select(func.count(Book.id)))
            total = count_result.scalar() or 0

            items = [
                BookListItem(
                    id=book.id,
                    title=book.title,
                    author_id=NameRef(name=names[book.author_id])
                    if book.author_id in names
                    else None,
                )
                for book in books
            ]

            return BookListResponse(
                msg="Books fetched successfully",
                total_books=total,
                data=items,
            )

    async def delete_book(self, db: AsyncSession, book_id: str) -> Envelope:
        with store_errors("delete_book"):
            await self._delete_by_id(db, book_id)
            return Envelope(msg="Book deleted successfully")


book_service = BookService()
