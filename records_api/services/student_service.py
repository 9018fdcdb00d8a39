"""
Records API - Student Service
=============================

What:  Create, list and delete students.

Email uniqueness:
    Emails are stored as sent (surrounding whitespace trimmed), so the
    uniqueness check is an exact match. The unique constraint on
    students.email rejects duplicates at flush time; the
    IntegrityError becomes ConflictError("Email already exists").
"""

import logging
import uuid

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from records_api.exceptions import ConflictError, ValidationError
from records_api.models.student import Student
from records_api.schemas.common import Envelope
from records_api.schemas.student import (
    StudentCreate,
    StudentListResponse,
    StudentOut,
    StudentResponse,
)
from records_api.services.base import RecordService, is_blank, store_errors

logger = logging.getLogger(__name__)


class StudentService(RecordService):
    model = Student
    resource = "Student"
    not_found_message = "student not found"

    async def create_student(self, db: AsyncSession, payload: StudentCreate) -> StudentResponse:
        """
        Insert a new student.

        Raises:
            ValidationError: name or email missing/empty (→ 400)
            ConflictError: another student already has this email (→ 400)
            DatabaseError: insert failed for any other reason (→ 500)
        """
        if is_blank(payload.name) or is_blank(payload.email):
            raise ValidationError(message="Name and email are required")

        email = payload.email.strip()

        with store_errors("create_student"):
            student = Student(id=uuid.uuid4(), name=payload.name.strip(), email=email)
            db.add(student)
            try:
                await db.flush()
            except IntegrityError as e:
                logger.warning("Duplicate student email rejected: %s", email)
                raise ConflictError(
                    message="Email already exists",
                    field="email",
                    context={"constraint": "uq_students_email"},
                ) from e
            logger.info("Student created: %s", student.id)

            return StudentResponse(
                msg="Student created successfully",
                data=StudentOut(id=student.id, name=student.name, email=student.email),
            )

    async def list_students(self, db: AsyncSession) -> StudentListResponse:
        with store_errors("list_students"):
            result = await db.execute(select(Student).order_by(Student.created_at, Student.id))
            students = list(result.scalars().all())

            count_result = await db.execute(select(func.count(Student.id)))
            total = count_result.scalar() or 0

            return StudentListResponse(
                msg="Students fetched successfully",
                total_students=total,
                data=[StudentOut(id=s.id, name=s.name, email=s.email) for s in students],
            )

    async def delete_student(self, db: AsyncSession, student_id: str) -> Envelope:
        with store_errors("delete_student"):
            await self._delete_by_id(db, student_id)
            return Envelope(msg="Student deleted successfully")


student_service = StudentService()
