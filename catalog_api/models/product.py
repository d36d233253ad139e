"""
Catalog API — Product SQLAlchemy Model
=======================================

What:  ORM model representing the `products` table.
Who:   Used by ProductService for CRUD operations and by Alembic for schema management.

Table Design Rationale:
    - slug: unique + indexed, the public lookup key for storefront URLs
    - buying_price / sale_price: NUMERIC(12, 2), never float, so money keeps
      exact cents
    - image: free-form reference (URL or storage key); the API does not host files
"""

from decimal import Decimal
from typing import Optional

from sqlalchemy import Index, Numeric, String, text
from sqlalchemy.orm import Mapped, mapped_column

from catalog_api.database import Base
from catalog_api.models.mixins import IdentifierMixin, TimestampMixin


class Product(IdentifierMixin, TimestampMixin, Base):
    __tablename__ = "products"

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    slug: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="URL-friendly unique identifier derived from name",
    )

    buying_price: Mapped[Decimal] = mapped_column(
        Numeric(12, 2),
        nullable=False,
        default=Decimal("0"),
        server_default=text("0"),
    )

    sale_price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)

    image: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    __table_args__ = (
        Index("idx_products_created_at", text("created_at DESC")),
    )

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, slug='{self.slug}')>"
