"""Book request/response schemas."""

import uuid
from typing import List, Optional

from pydantic import Field

from records_api.schemas.common import APIModel, Envelope, NameRef


class BookCreate(APIModel):
    title: Optional[str] = None
    # Kept as a string: an empty value is a "required" failure, a malformed
    # one is reported separately by BookService.
    author_id: Optional[str] = Field(default=None, alias="authorId")


class BookOut(APIModel):
    """A book as stored: authorId is the raw author identifier."""

    id: uuid.UUID
    title: str
    author_id: uuid.UUID = Field(alias="authorId")

    model_config = {"from_attributes": True, "populate_by_name": True}


class BookListItem(APIModel):
    """A book in listings: authorId expanded to the author's name, or null."""

    id: uuid.UUID
    title: str
    author_id: Optional[NameRef] = Field(default=None, alias="authorId")


class BookResponse(Envelope):
    data: BookOut


class BookListResponse(Envelope):
    total_books: int = Field(alias="totalBooks")
    data: List[BookListItem]
