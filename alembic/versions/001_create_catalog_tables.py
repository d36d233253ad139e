"""Create products, schools and categories tables

Revision ID: 001
Revises: None
Create Date: 2024-05-01 00:00:00.000000+00:00

What:  Initial schema for the three catalog resources.
How:   Text UUID primary keys, unique slugs (and unique category names),
       timezone-aware timestamps, and a created_at DESC index per table for
       the newest-first list query.

Rollback: downgrade() drops all three tables (destructive).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="When the record was created (UTC)",
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="When the record was last modified (UTC)",
        ),
    ]


def upgrade() -> None:
    """Create the three tables with their unique constraints and indexes."""
    op.create_table(
        "products",
        sa.Column("id", sa.String(36), nullable=False, comment="Opaque unique identifier (UUID4 text)"),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("slug", sa.String(255), nullable=False, comment="URL-friendly unique identifier derived from name"),
        sa.Column("buying_price", sa.Numeric(12, 2), nullable=False, server_default=sa.text("0")),
        sa.Column("sale_price", sa.Numeric(12, 2), nullable=False),
        sa.Column("image", sa.String(500), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_products_slug", "products", ["slug"], unique=True)
    op.create_index("idx_products_created_at", "products", [sa.text("created_at DESC")])

    op.create_table(
        "schools",
        sa.Column("id", sa.String(36), nullable=False, comment="Opaque unique identifier (UUID4 text)"),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("logo", sa.String(500), nullable=True),
        sa.Column("slug", sa.String(255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_schools_slug", "schools", ["slug"], unique=True)
    op.create_index("idx_schools_created_at", "schools", [sa.text("created_at DESC")])

    op.create_table(
        "categories",
        sa.Column("id", sa.String(36), nullable=False, comment="Opaque unique identifier (UUID4 text)"),
        sa.Column("name", sa.String(100), nullable=False, comment="Display name, unique across all categories (active or not)"),
        sa.Column("slug", sa.String(100), nullable=False, comment="URL-friendly unique identifier derived from name"),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("color", sa.String(7), nullable=False, server_default=sa.text("'#6366F1'")),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name", name="uq_categories_name"),
    )
    op.create_index("ix_categories_slug", "categories", ["slug"], unique=True)
    op.create_index("idx_categories_created_at", "categories", [sa.text("created_at DESC")])
    op.create_index("idx_categories_is_active", "categories", ["is_active"])


def downgrade() -> None:
    """Drop all catalog tables. WARNING: destroys every record."""
    for table in ("categories", "schools", "products"):
        op.drop_index(f"idx_{table}_created_at", table_name=table)
        op.drop_index(f"ix_{table}_slug", table_name=table)
    op.drop_index("idx_categories_is_active", table_name="categories")
    op.drop_table("categories")
    op.drop_table("schools")
    op.drop_table("products")
