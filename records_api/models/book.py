"""
Records API - Book Model
========================

What:  ORM model for the `books` table.

Table Design:
    - author_id is a plain indexed UUID column, not a foreign key. Writes do
      not check that the author exists; a book may point at an author that
      was never created. Listing renders such a reference as null.
    - The index serves the author cascade delete
      (DELETE FROM books WHERE author_id = :id).
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from records_api.database import Base


class Book(Base):
    __tablename__ = "books"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)

    author_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    __table_args__ = (
        Index("idx_books_author_id", "author_id"),
    )

    def __repr__(self) -> str:
        return f"<Book(id={self.id}, title='{self.title}', author_id={self.author_id})>"
