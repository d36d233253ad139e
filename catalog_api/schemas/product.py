"""
Catalog API — Product Schemas
==============================

Prices are Decimals with two decimal places. They are accepted as JSON
numbers or strings and serialized back as strings ("19.99") so no precision
is lost in transit.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import ConfigDict, Field, field_validator

from catalog_api.schemas.common import APIModel, SLUG_PATTERN, ensure_not_null


class ProductRead(APIModel):
    id: str = Field(description="Unique product identifier")
    name: str = Field(description="Product name")
    slug: str = Field(description="URL-friendly unique identifier")
    buying_price: Decimal = Field(description="Purchase cost")
    sale_price: Decimal = Field(description="Selling price")
    image: Optional[str] = Field(default=None, description="Image URL or storage key")
    created_at: datetime = Field(description="Creation timestamp (UTC)")
    updated_at: datetime = Field(description="Last modification timestamp (UTC)")


class ProductCreate(APIModel):
    name: str = Field(min_length=1, max_length=255, examples=["Wireless Mouse"])
    slug: Optional[str] = Field(
        default=None,
        min_length=1,
        max_length=255,
        pattern=SLUG_PATTERN,
        description="Omit to derive from name",
    )
    buying_price: Decimal = Field(
        default=Decimal("0"), ge=0, max_digits=12, decimal_places=2, examples=["12.50"]
    )
    sale_price: Decimal = Field(ge=0, max_digits=12, decimal_places=2, examples=["19.99"])
    image: Optional[str] = Field(default=None, max_length=500)

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [{"name": "Wireless Mouse", "buyingPrice": "12.50", "salePrice": "19.99"}]
        }
    )


class ProductUpdate(APIModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    slug: Optional[str] = Field(default=None, min_length=1, max_length=255, pattern=SLUG_PATTERN)
    buying_price: Optional[Decimal] = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    sale_price: Optional[Decimal] = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    image: Optional[str] = Field(default=None, max_length=500)

    @field_validator("name", "slug", "buying_price", "sale_price")
    @classmethod
    def forbid_null(cls, v):
        return ensure_not_null(v)
