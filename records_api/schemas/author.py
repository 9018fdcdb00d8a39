"""Author request/response schemas."""

import uuid
from typing import List, Optional

from pydantic import Field

from records_api.schemas.common import APIModel, Envelope


class AuthorCreate(APIModel):
    # Optional so that a missing name reaches the service and is reported
    # with the API's own message instead of a schema error.
    name: Optional[str] = None


class AuthorOut(APIModel):
    id: uuid.UUID
    name: str

    model_config = {"from_attributes": True, "populate_by_name": True}


class AuthorResponse(Envelope):
    data: AuthorOut


class AuthorListResponse(Envelope):
    total_authors: int = Field(alias="totalAuthors")
    data: List[AuthorOut]
