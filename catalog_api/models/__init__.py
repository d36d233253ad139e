"""
ORM models. Importing this package registers every table on Base.metadata,
which Alembic autogenerate and the test suite's create_all() rely on.
"""

from catalog_api.models.category import Category
from catalog_api.models.product import Product
from catalog_api.models.school import School

__all__ = ["Category", "Product", "School"]
