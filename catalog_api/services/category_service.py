"""
Catalog API — Category Service
===============================

What:  CRUD for categories with soft-delete semantics.
How:   Inherits ResourceService; narrows list() to active rows and turns
       delete() into clearing `is_active`.

Visibility rules:
    list        → active only
    get by id   → any row; a deleted category comes back with isActive=false
    update      → any row; PATCH {"isActive": true} restores a deleted category
"""

import logging
from typing import Any, List

from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.models.category import Category
from catalog_api.schemas.category import CategoryRead
from catalog_api.schemas.common import MessageResponse
from catalog_api.services.base import ResourceService

logger = logging.getLogger(__name__)


class CategoryService(ResourceService[Category, CategoryRead]):
    model = Category
    read_schema = CategoryRead
    resource_name = "category"

    def list_filters(self) -> List[Any]:
        return [Category.is_active.is_(True)]

    async def delete(self, db: AsyncSession, record_id: str) -> MessageResponse:
        """Soft delete: the row stays, `is_active` is cleared."""
        category = await self._get_or_404(db, record_id)
        category.is_active = False
        await self._flush(db, "delete")

        logger.info("Soft-deleted category %s (slug=%s)", category.id, category.slug)
        return MessageResponse(message="Category deleted successfully")


category_service = CategoryService()
