"""
Records API - Classroom Route Handlers
======================================

What:  POST /api/classroom (201), GET /api/classrooms, DELETE /api/classroom/{classroom_id}
The listing returns each classroom's students expanded to {"name": ...}.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from records_api.database import get_db_session
from records_api.schemas.classroom import (
    ClassroomCreate,
    ClassroomListResponse,
    ClassroomResponse,
)
from records_api.schemas.common import Envelope, ErrorResponse
from records_api.services.classroom_service import classroom_service

router = APIRouter(prefix="/api", tags=["Classrooms"])


@router.post(
    "/classroom",
    status_code=201,
    response_model=ClassroomResponse,
    responses={
        400: {"description": "name or students missing or empty", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a classroom",
)
async def create_classroom(
    payload: Optional[ClassroomCreate] = None,
    db: AsyncSession = Depends(get_db_session),
) -> ClassroomResponse:
    return await classroom_service.create_classroom(db, payload or ClassroomCreate())


@router.get(
    "/classrooms",
    response_model=ClassroomListResponse,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List all classrooms with their students' names",
)
async def list_classrooms(db: AsyncSession = Depends(get_db_session)) -> ClassroomListResponse:
    return await classroom_service.list_classrooms(db)


@router.delete(
    "/classroom/{classroom_id}",
    response_model=Envelope,
    responses={
        404: {"description": "Classroom not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Delete a classroom",
)
async def delete_classroom(
    classroom_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> Envelope:
    return await classroom_service.delete_classroom(db, classroom_id)
