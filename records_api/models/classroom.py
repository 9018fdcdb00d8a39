"""
Records API - Classroom Model
=============================

What:  ORM model for the `classrooms` table.

Table Design:
    `students` keeps the referenced student ids as a JSON array of UUID
    strings on the classroom row itself, in the order the client sent them.
    There is no join table and no foreign key: deleting a student leaves its
    id in the array, and the listing simply skips ids that no longer resolve.
"""

import uuid
from datetime import datetime, timezone
from typing import List

from sqlalchemy import JSON, DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from records_api.database import Base


class Classroom(Base):
    __tablename__ = "classrooms"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    students: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def __repr__(self) -> str:
        return f"<Classroom(id={self.id}, name='{self.name}', students={len(self.students or [])})>"
