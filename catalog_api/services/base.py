"""
Catalog API — Generic Resource Service
=======================================

What:  CRUD operations shared by every resource, plus the translation of
       persistence failures into the application's error taxonomy.
Why:   Products, schools and categories differ only in their table, their
       list filter and their delete semantics. The rest lives here once.
How:   Subclasses set `model`, `read_schema`, `resource_name`, and override
       `list_filters()` / `delete()` where they differ.

Operation → outcome:
    list    → [Read]                       DatabaseError
    get     → Read          NotFoundError  DatabaseError
    create  → Read          ConflictError  DatabaseError  ValidationError (empty slug)
    update  → Read          NotFoundError  ConflictError  DatabaseError
    delete  → MessageResponse NotFoundError DatabaseError

Error Mapping:
    The only place a driver error is inspected is `_flush()`. A unique
    violation becomes ConflictError (409); anything else becomes
    DatabaseError (500) with the original type kept in `context` for logs.

Concurrency:
    update/delete look the row up before writing. Another request can change
    or remove it in between; the database serializes the writes and the
    last one wins. No lock is taken here.
"""

import logging
from typing import Any, ClassVar, Dict, Generic, List, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import desc, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.database import Base, is_unique_violation
from catalog_api.exceptions import (
    CatalogAPIError,
    ConflictError,
    DatabaseError,
    NotFoundError,
    ValidationError,
)
from catalog_api.schemas.common import MessageResponse
from catalog_api.services.slug import slugify

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)
ReadT = TypeVar("ReadT", bound=BaseModel)


class ResourceService(Generic[ModelT, ReadT]):
    """
    Stateless CRUD handler for one resource.

    Subclass contract:
        model:          SQLAlchemy model class (must have id, slug, name, created_at)
        read_schema:    Pydantic response schema built from the model
        resource_name:  Singular noun used in messages ("category")
    """

    model: ClassVar[Type[Any]]
    read_schema: ClassVar[Type[BaseModel]]
    resource_name: ClassVar[str]

    # ── Hooks ─────────────────────────────────────────────────────────────

    def list_filters(self) -> List[Any]:
        """WHERE clauses applied to list(). Empty means every row."""
        return []

    # ── Operations ────────────────────────────────────────────────────────

    async def list(self, db: AsyncSession) -> List[ReadT]:
        """All records passing `list_filters()`, newest first."""
        try:
            query = (
                select(self.model)
                .where(*self.list_filters())
                .order_by(desc(self.model.created_at))
            )
            result = await db.execute(query)
            return [self.read_schema.model_validate(obj) for obj in result.scalars().all()]
        except Exception as e:
            raise self._persistence_failure("list", e)

    async def get(self, db: AsyncSession, record_id: str) -> ReadT:
        """
        Single record by id.

        No list filters apply here: a soft-deleted category is still returned.
        """
        obj = await self._get_or_404(db, record_id)
        return self.read_schema.model_validate(obj)

    async def create(self, db: AsyncSession, payload: BaseModel) -> ReadT:
        """
        Persist a new record from a validated create payload.

        Slug: taken from the payload when given, otherwise derived from name.
        """
        data = payload.model_dump()
        if not data.get("slug"):
            data["slug"] = self._derive_slug(data["name"])

        obj = self.model(**data)
        db.add(obj)
        await self._flush(db, "create")

        logger.info("Created %s %s (slug=%s)", self.resource_name, obj.id, obj.slug)
        return self.read_schema.model_validate(obj)

    async def update(self, db: AsyncSession, record_id: str, payload: BaseModel) -> ReadT:
        """
        Apply the fields the client actually sent.

        Slug follows a changed name unless the payload sets slug itself.
        """
        obj = await self._get_or_404(db, record_id)
        changes: Dict[str, Any] = payload.model_dump(exclude_unset=True)

        new_name = changes.get("name")
        if new_name is not None and new_name != obj.name and "slug" not in changes:
            changes["slug"] = self._derive_slug(new_name)

        for field, value in changes.items():
            setattr(obj, field, value)
        await self._flush(db, "update")

        logger.info(
            "Updated %s %s (fields=%s)", self.resource_name, obj.id, sorted(changes)
        )
        return self.read_schema.model_validate(obj)

    async def delete(self, db: AsyncSession, record_id: str) -> MessageResponse:
        """Remove the row. Soft-delete resources override this."""
        obj = await self._get_or_404(db, record_id)
        await db.delete(obj)
        await self._flush(db, "delete")

        logger.info("Deleted %s %s", self.resource_name, record_id)
        return MessageResponse(message=f"{self.resource_name.capitalize()} deleted successfully")

    # ── Internals ─────────────────────────────────────────────────────────

    async def _get_or_404(self, db: AsyncSession, record_id: str) -> ModelT:
        try:
            result = await db.execute(select(self.model).where(self.model.id == record_id))
            obj = result.scalar_one_or_none()
        except Exception as e:
            raise self._persistence_failure("get", e, record_id=record_id)

        if obj is None:
            raise NotFoundError(resource=self.resource_name, resource_id=record_id)
        return obj

    async def _flush(self, db: AsyncSession, action: str) -> None:
        """
        Send pending writes so constraint violations surface here, inside the
        service, instead of at commit time in the session dependency.
        """
        try:
            await db.flush()
        except IntegrityError as e:
            await db.rollback()
            if is_unique_violation(e):
                logger.warning("Unique violation on %s %s: %s", action, self.resource_name, e.orig)
                raise ConflictError(
                    resource=self.resource_name,
                    message=f"A {self.resource_name} with this name or slug already exists",
                )
            raise self._persistence_failure(action, e)
        except Exception as e:
            await db.rollback()
            raise self._persistence_failure(action, e)

    def _derive_slug(self, name: str) -> str:
        slug = slugify(name)
        if not slug:
            raise ValidationError(
                message="Could not derive a slug from name; provide a slug explicitly",
                field="slug",
            )
        return slug

    def _persistence_failure(self, action: str, exc: Exception, **context: Any) -> CatalogAPIError:
        """Log the real cause; hand back a client-safe error to raise."""
        if isinstance(exc, CatalogAPIError):
            return exc
        logger.error(
            "Database error during %s %s: %s", action, self.resource_name, exc, exc_info=True
        )
        return DatabaseError(
            message=f"Could not {action} {self.resource_name}. Please try again later.",
            context={"error_type": type(exc).__name__, **context},
        )
