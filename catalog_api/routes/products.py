"""
Catalog API — Product Route Handlers
=====================================

Same five routes as categories. Differences:
    - list returns every product (no active flag)
    - DELETE removes the row
    - prices travel as decimal strings ("19.99")
"""

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
from catalog_api.schemas.product import ProductCreate, ProductRead, ProductUpdate
from catalog_api.services.product_service import product_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/products", tags=["Products"])


@router.get(
    "",
    response_model=List[ProductRead],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List products",
    description="Returns all products, newest first. Total in `X-Total-Count`.",
)
async def list_products(
    response: Response,
    db: AsyncSession = Depends(get_db_session),
) -> List[ProductRead]:
    products = await product_service.list(db)
    response.headers["X-Total-Count"] = str(len(products))
    return products


@router.post(
    "",
    status_code=201,
    response_model=ProductRead,
    responses={
        409: {"description": "Slug already taken", "model": ErrorResponse},
        422: {"description": "Invalid request body", "model": ValidationErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a product",
    description="Creates a product. `slug` is derived from `name` when omitted; `buyingPrice` defaults to 0.",
)
async def create_product(
    payload: ProductCreate,
    db: AsyncSession = Depends(get_db_session),
) -> ProductRead:
    return await product_service.create(db, payload)


@router.get(
    "/{product_id}",
    response_model=ProductRead,
    responses={
        404: {"description": "Product not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get a product by ID",
)
async def get_product(
    product_id: ResourceId,
    db: AsyncSession = Depends(get_db_session),
) -> ProductRead:
    return await product_service.get(db, product_id)


@router.patch(
    "/{product_id}",
    response_model=ProductRead,
    responses={
        404: {"description": "Product not found", "model": ErrorResponse},
        409: {"description": "Slug already taken", "model": ErrorResponse},
        422: {"description": "Invalid request body", "model": ValidationErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Update a product",
    description="Partial update. A new `name` without `slug` re-derives the slug.",
)
async def update_product(
    product_id: ResourceId,
    payload: ProductUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> ProductRead:
    return await product_service.update(db, product_id, payload)


@router.delete(
    "/{product_id}",
    response_model=MessageResponse,
    responses={
        404: {"description": "Product not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Delete a product",
)
async def delete_product(
    product_id: ResourceId,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    return await product_service.delete(db, product_id)
