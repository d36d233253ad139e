"""Product CRUD. Plain ResourceService behaviour: all rows listed, hard delete."""

from catalog_api.models.product import Product
from catalog_api.schemas.product import ProductRead
from catalog_api.services.base import ResourceService


class ProductService(ResourceService[Product, ProductRead]):
    model = Product
    read_schema = ProductRead
    resource_name = "product"


product_service = ProductService()
