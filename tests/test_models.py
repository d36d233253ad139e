"""
Catalog API — ORM Metadata Tests
=================================

What:  The declared tables must describe the same indexes and constraints
       the 001 migration creates, so autogenerate finds nothing to change.

What we test:
    ✅ Unique slug index per table (ix_<table>_slug)
    ✅ Newest-first created_at index per table (DESC)
    ✅ Named unique constraint on category name
"""

import pytest
from sqlalchemy import UniqueConstraint

from catalog_api.models import Category, Product, School


def _indexes(model):
    return {index.name: index for index in model.__table__.indexes}


class TestTableMetadata:

    @pytest.mark.parametrize("model", [Product, School, Category])
    def test_unique_slug_index(self, model):
        index = _indexes(model)[f"ix_{model.__tablename__}_slug"]

        assert index.unique
        assert [c.name for c in index.columns] == ["slug"]

    @pytest.mark.parametrize("model", [Product, School, Category])
    def test_created_at_index_is_descending(self, model):
        index = _indexes(model)[f"idx_{model.__tablename__}_created_at"]

        (expression,) = index.expressions
        assert str(expression) == "created_at DESC"

    def test_category_name_constraint_is_named(self):
        unique_constraints = {
            c.name: [col.name for col in c.columns]
            for c in Category.__table__.constraints
            if isinstance(c, UniqueConstraint)
        }

        assert unique_constraints == {"uq_categories_name": ["name"]}
        assert not Category.__table__.c.name.unique

    def test_category_is_active_index(self):
        index = _indexes(Category)["idx_categories_is_active"]

        assert [c.name for c in index.columns] == ["is_active"]
