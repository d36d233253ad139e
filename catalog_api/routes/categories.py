"""
Catalog API — Category Route Handlers
======================================

What:  The five CRUD routes of the categories resource.
Why:   Categories are the reference resource: every other router copies this
       shape, so this one carries the full documentation.

    GET    /api/categories        active categories, newest first
    POST   /api/categories        create; slug derived from name when omitted
    GET    /api/categories/{id}   any category, including soft-deleted ones
    PATCH  /api/categories/{id}   partial update
    DELETE /api/categories/{id}   soft delete (isActive → false)

Every route declares its full status → response map, so the generated
OpenAPI document lists 404/409/422/500 bodies alongside the success shape.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.database import get_db_session
from catalog_api.schemas.category import CategoryCreate, CategoryRead, CategoryUpdate
from catalog_api.schemas.common import (
    ErrorResponse,
    MessageResponse,
    ResourceId,
    ValidationErrorResponse,
)
from catalog_api.services.category_service import category_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/categories", tags=["Categories"])


@router.get(
    "",
    response_model=List[CategoryRead],
    responses={
        200: {"description": "Active categories, newest first"},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List active categories",
    description=(
        "Returns every category whose `isActive` flag is true, ordered by creation "
        "time (newest first). Soft-deleted categories are excluded. The total is "
        "also sent in the `X-Total-Count` header."
    ),
)
async def list_categories(
    response: Response,
    db: AsyncSession = Depends(get_db_session),
) -> List[CategoryRead]:
    categories = await category_service.list(db)
    response.headers["X-Total-Count"] = str(len(categories))
    return categories


@router.post(
    "",
    status_code=201,
    response_model=CategoryRead,
    responses={
        201: {"description": "Category created"},
        409: {"description": "Name or slug already taken", "model": ErrorResponse},
        422: {"description": "Invalid request body", "model": ValidationErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a category",
    description=(
        "Creates a category. When `slug` is omitted it is derived from `name`: "
        "lower-cased, runs of non-alphanumeric characters replaced by a single "
        "hyphen, leading/trailing hyphens trimmed (\"Home & Garden\" → \"home-garden\"). "
        "`color` defaults to `#6366F1` and `isActive` to `true`."
    ),
)
async def create_category(
    payload: CategoryCreate,
    db: AsyncSession = Depends(get_db_session),
) -> CategoryRead:
    return await category_service.create(db, payload)


@router.get(
    "/{category_id}",
    response_model=CategoryRead,
    responses={
        200: {"description": "The category"},
        404: {"description": "Category not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get a category by ID",
    description=(
        "Returns the category with the given ID. Soft-deleted categories are still "
        "returned, with `isActive: false`."
    ),
)
async def get_category(
    category_id: ResourceId,
    db: AsyncSession = Depends(get_db_session),
) -> CategoryRead:
    return await category_service.get(db, category_id)


@router.patch(
    "/{category_id}",
    response_model=CategoryRead,
    responses={
        200: {"description": "Updated category"},
        404: {"description": "Category not found", "model": ErrorResponse},
        409: {"description": "Name or slug already taken", "model": ErrorResponse},
        422: {"description": "Invalid request body", "model": ValidationErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Update a category",
    description=(
        "Updates only the fields present in the body. Changing `name` without "
        "sending `slug` re-derives the slug from the new name. Sending "
        "`isActive: true` restores a soft-deleted category."
    ),
)
async def update_category(
    category_id: ResourceId,
    payload: CategoryUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> CategoryRead:
    return await category_service.update(db, category_id, payload)


@router.delete(
    "/{category_id}",
    response_model=MessageResponse,
    responses={
        200: {"description": "Category deactivated"},
        404: {"description": "Category not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Delete (deactivate) a category",
    description=(
        "Soft delete: sets `isActive` to false. The record is kept, disappears "
        "from the list endpoint, and remains retrievable by ID."
    ),
)
async def delete_category(
    category_id: ResourceId,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    return await category_service.delete(db, category_id)
