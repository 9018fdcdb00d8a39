"""
Records API - Classroom Service
===============================

What:  Create, list and delete classrooms.

A classroom keeps its student ids in a JSON array. The listing expands the
array in one extra query (SELECT id, name FROM students WHERE id IN ...)
and keeps the stored order. Ids whose student has been deleted are left
out of the expansion.
"""

import logging
import uuid
from typing import Dict, List

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from records_api.exceptions import ValidationError
from records_api.models.classroom import Classroom
from records_api.models.student import Student
from records_api.schemas.classroom import (
    ClassroomCreate,
    ClassroomListItem,
    ClassroomListResponse,
    ClassroomOut,
    ClassroomResponse,
)
from records_api.schemas.common import Envelope, NameRef
from records_api.services.base import RecordService, is_blank, parse_record_id, store_errors

logger = logging.getLogger(__name__)


class ClassroomService(RecordService):
    model = Classroom
    resource = "Classroom"
    not_found_message = "ClassRoom not found"

    async def create_classroom(
        self, db: AsyncSession, payload: ClassroomCreate
    ) -> ClassroomResponse:
        """
        Insert a new classroom referencing one or more students.

        Student ids are stored as given; they are not checked against the
        students table.

        Raises:
            ValidationError: name empty or students missing/empty (→ 400)
            DatabaseError: insert failed (→ 500)
        """
        if is_blank(payload.name) or is_blank(payload.students):
            raise ValidationError(message="name and students are required")

        with store_errors("create_classroom"):
            classroom = Classroom(
                id=uuid.uuid4(),
                name=payload.name.strip(),
                students=[str(student_id) for student_id in payload.students],
            )
            db.add(classroom)
            await db.flush()
            logger.info(
                "Classroom created: %s with %d student(s)",
                classroom.id,
                len(classroom.students),
            )

            return ClassroomResponse(
                msg="classroom created successfully",
                data=ClassroomOut(
                    id=classroom.id,
                    name=classroom.name,
                    students=list(payload.students),
                ),
            )

    async def list_classrooms(self, db: AsyncSession) -> ClassroomListResponse:
        with store_errors("list_classrooms"):
            result = await db.execute(
                select(Classroom).order_by(Classroom.created_at, Classroom.id)
            )
            classrooms = list(result.scalars().all())

            referenced = set()
            for classroom in classrooms:
                for raw in classroom.students or []:
                    parsed = parse_record_id(raw)
                    if parsed is not None:
                        referenced.add(parsed)

            names: Dict[uuid.UUID, str] = {}
            if referenced:
                student_rows = await db.execute(
                    select(Student.id, Student.name).where(Student.id.in_(referenced))
                )
                names = {row.id: row.name for row in student_rows}

            count_result = await db.execute(select(func.count(Classroom.id)))
            total = count_result.scalar() or 0

            items = [
                ClassroomListItem(
                    id=classroom.id,
                    name=classroom.name,
                    students=self._expand(classroom.students or [], names),
                )
                for classroom in classrooms
            ]

            return ClassroomListResponse(
                msg="classroom fetched successfully",
                total_classrooms=total,
                data=items,
            )

    @staticmethod
    def _expand(student_ids: List[str], names: Dict[uuid.UUID, str]) -> List[NameRef]:
        expanded = []
        for raw in student_ids:
            parsed = parse_record_id(raw)
            if parsed in names:
                expanded.append(NameRef(name=names[parsed]))
        return expanded

    async def delete_classroom(self, db: AsyncSession, classroom_id: str) -> Envelope:
        with store_errors("delete_classroom"):
            await self._delete_by_id(db, classroom_id)
            return Envelope(msg="ClassRoom deleted successfully")


classroom_service = ClassroomService()
