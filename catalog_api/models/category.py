"""
Catalog API — Category SQLAlchemy Model
========================================

What:  ORM model representing the `categories` table, the fully documented
       example resource of this template.
Why:   Demonstrates every convention in one place: unique business key (name),
       unique slug, optional text, a defaulted display field, and soft delete.

Lifecycle:
    1. Created active (is_active = true)
    2. Updated through PATCH; slug follows name unless given explicitly
    3. "Deleted" by clearing is_active; the row stays, so historical
       references keep resolving and GET by id still answers

Query Patterns:
    - List:        WHERE is_active ORDER BY created_at DESC
    - Get by id:   WHERE id = :id  (no is_active filter)
"""

from typing import Optional

from sqlalchemy import Boolean, Index, String, Text, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column

from catalog_api.database import Base
from catalog_api.models.mixins import IdentifierMixin, TimestampMixin

DEFAULT_CATEGORY_COLOR = "#6366F1"


class Category(IdentifierMixin, TimestampMixin, Base):
    """A product grouping. Soft-deleted via `is_active`, never removed."""

    __tablename__ = "categories"

    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Display name, unique across all categories (active or not)",
    )

    slug: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        unique=True,
        index=True,
        comment="URL-friendly unique identifier derived from name",
    )

    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Hex color used by front-ends for badges; #RGB or #RRGGBB
    color: Mapped[str] = mapped_column(
        String(7),
        nullable=False,
        default=DEFAULT_CATEGORY_COLOR,
        server_default=text(f"'{DEFAULT_CATEGORY_COLOR}'"),
    )

    # Soft-delete flag. Uniqueness of name/slug still applies to inactive rows.
    is_active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        server_default=text("true"),
    )

    __table_args__ = (
        UniqueConstraint("name", name="uq_categories_name"),
        Index("idx_categories_created_at", text("created_at DESC")),
        Index("idx_categories_is_active", "is_active"),
    )

    def __repr__(self) -> str:
        return (
            f"<Category(id={self.id}, slug='{self.slug}', "
            f"is_active={self.is_active})>"
        )
