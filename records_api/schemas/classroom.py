"""Classroom request/response schemas."""

import uuid
from typing import List, Optional

from pydantic import Field

from records_api.schemas.common import APIModel, Envelope, NameRef


class ClassroomCreate(APIModel):
    name: Optional[str] = None
    # Each entry must parse as a student identifier; the list must be non-empty.
    students: Optional[List[uuid.UUID]] = None


class ClassroomOut(APIModel):
    id: uuid.UUID
    name: str
    students: List[uuid.UUID]

    model_config = {"from_attributes": True, "populate_by_name": True}


class ClassroomListItem(APIModel):
    """A classroom in listings: each student expanded to its name."""

    id: uuid.UUID
    name: str
    students: List[NameRef]


class ClassroomResponse(Envelope):
    data: ClassroomOut


class ClassroomListResponse(Envelope):
    # The published contract reuses the students' count key for classrooms.
    total_classrooms: int = Field(alias="totalStudents")
    data: List[ClassroomListItem]
