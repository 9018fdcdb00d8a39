"""
Records API - Author Model
==========================

What:  ORM model for the `authors` table.
Who:   Used by AuthorService, and by BookService to expand book references.

An author owns its books only by convention: books point at an author through
`books.author_id`, and deleting an author removes those books in the same
transaction (see AuthorService.delete_author).
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from records_api.database import Base


class Author(Base):
    __tablename__ = "authors"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # Listing order follows insertion order
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def __repr__(self) -> str:
        return f"<Author(id={self.id}, name='{self.name}')>"
