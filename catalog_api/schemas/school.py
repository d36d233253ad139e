"""School request/response contracts."""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from catalog_api.schemas.common import APIModel, SLUG_PATTERN, ensure_not_null


class SchoolRead(APIModel):
    id: str
    name: str
    logo: Optional[str] = None
    slug: str
    created_at: datetime
    updated_at: datetime


class SchoolCreate(APIModel):
    name: str = Field(min_length=1, max_length=255, examples=["Riverside High School"])
    logo: Optional[str] = Field(default=None, max_length=500, description="Logo URL or storage key")
    slug: Optional[str] = Field(
        default=None,
        min_length=1,
        max_length=255,
        pattern=SLUG_PATTERN,
        description="Omit to derive from name",
    )


class SchoolUpdate(APIModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    logo: Optional[str] = Field(default=None, max_length=500)
    slug: Optional[str] = Field(default=None, min_length=1, max_length=255, pattern=SLUG_PATTERN)

    @field_validator("name", "slug")
    @classmethod
    def forbid_null(cls, v):
        return ensure_not_null(v)
