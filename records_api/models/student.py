"""
Records API - Student Model
===========================

What:  ORM model for the `students` table.

The unique constraint on email is the only uniqueness rule in the system and
it is enforced by the database, not by a pre-insert lookup. Two concurrent
creates with the same email cannot both succeed: the second flush raises
IntegrityError, which StudentService turns into ConflictError.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from records_api.database import Base


class Student(Base):
    __tablename__ = "students"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    email: Mapped[str] = mapped_column(String(320), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    __table_args__ = (
        UniqueConstraint("email", name="uq_students_email"),
    )

    def __repr__(self) -> str:
        return f"<Student(id={self.id}, email='{self.email}')>"
