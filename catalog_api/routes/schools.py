"""School routes: /api/schools, five CRUD operations, hard delete."""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.database import get_db_session
from catalog_api.schemas.common import (
    ErrorResponse,
    MessageResponse,
    ResourceId,
    ValidationErrorResponse,
)
from catalog_api.schemas.school import SchoolCreate, SchoolRead, SchoolUpdate
from catalog_api.services.school_service import school_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/schools", tags=["Schools"])


@router.get(
    "",
    response_model=List[SchoolRead],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List schools",
)
async def list_schools(
    response: Response,
    db: AsyncSession = Depends(get_db_session),
) -> List[SchoolRead]:
    schools = await school_service.list(db)
    response.headers["X-Total-Count"] = str(len(schools))
    return schools


@router.post(
    "",
    status_code=201,
    response_model=SchoolRead,
    responses={
        409: {"description": "Slug already taken", "model": ErrorResponse},
        422: {"description": "Invalid request body", "model": ValidationErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a school",
)
async def create_school(
    payload: SchoolCreate,
    db: AsyncSession = Depends(get_db_session),
) -> SchoolRead:
    return await school_service.create(db, payload)


@router.get(
    "/{school_id}",
    response_model=SchoolRead,
    responses={
        404: {"description": "School not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get a school by ID",
)
async def get_school(
    school_id: ResourceId,
    db: AsyncSession = Depends(get_db_session),
) -> SchoolRead:
    return await school_service.get(db, school_id)


@router.patch(
    "/{school_id}",
    response_model=SchoolRead,
    responses={
        404: {"description": "School not found", "model": ErrorResponse},
        409: {"description": "Slug already taken", "model": ErrorResponse},
        422: {"description": "Invalid request body", "model": ValidationErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Update a school",
)
async def update_school(
    school_id: ResourceId,
    payload: SchoolUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> SchoolRead:
    return await school_service.update(db, school_id, payload)


@router.delete(
    "/{school_id}",
    response_model=MessageResponse,
    responses={
        404: {"description": "School not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Delete a school",
)
async def delete_school(
    school_id: ResourceId,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    return await school_service.delete(db, school_id)
