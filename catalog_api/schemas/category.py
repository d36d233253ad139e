"""
Catalog API — Category Schemas
===============================

What:  Request/response contracts for the categories resource.
Why:   Category is the reference resource of this template; its schemas show
       every convention the other resources follow.

Shapes:
    CategoryRead    Full persisted record (response)
    CategoryCreate  POST body: no id/timestamps; slug optional (derived from name)
    CategoryUpdate  PATCH body: every field optional; explicit null rejected
                    for non-nullable columns

Defaults (`color`, `isActive`) are applied during validation, so the handler
receives a fully populated CategoryCreate.
"""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field, field_validator

from catalog_api.models.category import DEFAULT_CATEGORY_COLOR
from catalog_api.schemas.common import APIModel, SLUG_PATTERN, ensure_not_null

HEX_COLOR_PATTERN = r"^#(?:[0-9a-fA-F]{3}){1,2}$"


class CategoryRead(APIModel):
    id: str = Field(description="Unique category identifier")
    name: str = Field(description="Display name, unique")
    slug: str = Field(description="URL-friendly unique identifier")
    description: Optional[str] = Field(default=None, description="Free-text description")
    color: str = Field(description="Hex display color")
    is_active: bool = Field(description="False once the category has been deleted")
    created_at: datetime = Field(description="Creation timestamp (UTC)")
    updated_at: datetime = Field(description="Last modification timestamp (UTC)")


class CategoryCreate(APIModel):
    name: str = Field(
        min_length=1,
        max_length=100,
        description="Display name, unique across categories",
        examples=["Electronics"],
    )
    slug: Optional[str] = Field(
        default=None,
        min_length=1,
        max_length=100,
        pattern=SLUG_PATTERN,
        description="Omit to derive from name (\"Home & Garden\" → \"home-garden\")",
        examples=["electronics"],
    )
    description: Optional[str] = Field(
        default=None,
        max_length=2000,
        examples=["Phones, laptops and accessories"],
    )
    color: str = Field(
        default=DEFAULT_CATEGORY_COLOR,
        pattern=HEX_COLOR_PATTERN,
        description="Hex color, #RGB or #RRGGBB",
        examples=["#10B981"],
    )
    is_active: bool = Field(default=True, description="Inactive categories are hidden from lists")

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"name": "Electronics", "description": "Phones and laptops", "color": "#10B981"}
            ]
        }
    )


class CategoryUpdate(APIModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    slug: Optional[str] = Field(default=None, min_length=1, max_length=100, pattern=SLUG_PATTERN)
    description: Optional[str] = Field(default=None, max_length=2000)
    color: Optional[str] = Field(default=None, pattern=HEX_COLOR_PATTERN)
    is_active: Optional[bool] = Field(default=None)

    @field_validator("name", "slug", "color", "is_active")
    @classmethod
    def forbid_null(cls, v):
        return ensure_not_null(v)
