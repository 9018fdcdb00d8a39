"""
Records API - Author Service
============================

What:  Create, list and delete authors.
Who:   Called by the /api/author and /api/authors route handlers.

Cascade (DELETE /api/author/{id}):
    1. Load the author; unknown id → NotFoundError, nothing deleted
    2. DELETE FROM books WHERE author_id = :id
    3. DELETE the author row
    Both statements run in the request's session and commit together in
    get_db_session, so a failure between them rolls both back and no
    orphaned books are left behind.
"""

import logging
import uuid

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from records_api.exceptions import NotFoundError, ValidationError
from records_api.models.author import Author
from records_api.models.book import Book
from records_api.schemas.author import (
    AuthorCreate,
    AuthorListResponse,
    AuthorOut,
    AuthorResponse,
)
from records_api.schemas.common import Envelope
from records_api.services.base import RecordService, is_blank, parse_record_id, store_errors

logger = logging.getLogger(__name__)


class AuthorService(RecordService):
    model = Author
    resource = "Author"

    async def create_author(self, db: AsyncSession, payload: AuthorCreate) -> AuthorResponse:
        """
        Insert a new author.

        Raises:
            ValidationError: name missing or empty (→ 400)
            DatabaseError: insert failed (→ 500)
        """
        if is_blank(payload.name):
            raise ValidationError(message="Name is required", field="name")

        with store_errors("create_author"):
            author = Author(id=uuid.uuid4(), name=payload.name.strip())
            db.add(author)
            await db.flush()
            logger.info("Author created: %s", author.id)

            return AuthorResponse(
                msg="Author created successfully",
                data=AuthorOut(id=author.id, name=author.name),
            )

    async def list_authors(self, db: AsyncSession) -> AuthorListResponse:
        with store_errors("list_authors"):
            result = await db.execute(select(Author).order_by(Author.created_at, Author.id))
            authors = list(result.scalars().all())

            count_result = await db.execute(select(func.count(Author.id)))
            total = count_result.scalar() or 0

            return AuthorListResponse(
                msg="Authors fetched successfully",
                total_authors=total,
                data=[AuthorOut(id=a.id, name=a.name) for a in authors],
            )

    async def delete_author(self, db: AsyncSession, author_id: str) -> Envelope:
        """
        Delete an author and every book that references it.

        Raises:
            NotFoundError: no author with this id (→ 404); no books are touched
            DatabaseError: either delete failed (→ 500); the transaction rolls back
        """
        with store_errors("delete_author"):
            parsed = parse_record_id(author_id)
            author = await db.get(Author, parsed) if parsed is not None else None
            if author is None:
                raise NotFoundError(resource=self.resource, resource_id=str(author_id))

            result = await db.execute(delete(Book).where(Book.author_id == author.id))
            await db.delete(author)
            await db.flush()
            logger.info(
                "Author %s deleted with %d book(s)", author.id, result.rowcount or 0
            )

            return Envelope(msg="Author and their books deleted successfully")


author_service = AuthorService()
