"""
Records API - Student Route Handlers
====================================

What:  POST /api/student (201), GET /api/students, DELETE /api/student/{student_id}
"""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from records_api.database import get_db_session
from records_api.schemas.common import Envelope, ErrorResponse
from records_api.schemas.student import StudentCreate, StudentListResponse, StudentResponse
from records_api.services.student_service import student_service

router = APIRouter(prefix="/api", tags=["Students"])


@router.post(
    "/student",
    status_code=201,
    response_model=StudentResponse,
    responses={
        400: {"description": "Field missing or email already exists", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a student",
)
async def create_student(
    payload: Optional[StudentCreate] = None,
    db: AsyncSession = Depends(get_db_session),
) -> StudentResponse:
    return await student_service.create_student(db, payload or StudentCreate())


@router.get(
    "/students",
    response_model=StudentListResponse,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List all students",
)
async def list_students(db: AsyncSession = Depends(get_db_session)) -> StudentListResponse:
    return await student_service.list_students(db)


@router.delete(
    "/student/{student_id}",
    response_model=Envelope,
    responses={
        404: {"description": "Student not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Delete a student",
)
async def delete_student(
    student_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> Envelope:
    return await student_service.delete_student(db, student_id)
