"""Student request/response schemas."""

import uuid
from typing import List, Optional

from pydantic import Field

from records_api.schemas.common import APIModel, Envelope


class StudentCreate(APIModel):
    name: Optional[str] = None
    email: Optional[str] = None


class StudentOut(APIModel):
    id: uuid.UUID
    name: str
    email: str

    model_config = {"from_attributes": True, "populate_by_name": True}


class StudentResponse(Envelope):
    data: StudentOut


class StudentListResponse(Envelope):
    total_students: int = Field(alias="totalStudents")
    data: List[StudentOut]
