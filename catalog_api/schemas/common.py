"""
Catalog API — Shared Schema Building Blocks
============================================

What:  Base model config, path parameter shape, and the response envelopes
       shared by every resource (errors, messages, health).
Why:   One error format across all endpoints; one wire naming convention.

Wire naming:
    Responses use camelCase (`isActive`, `createdAt`) because the consumers
    are JavaScript front-ends. Requests accept camelCase or snake_case.
"""

from typing import Annotated, Any, Dict, List, Optional

from fastapi import Path
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# lower-case alphanumeric words joined by single hyphens: "summer-sale-2024"
SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"


class APIModel(BaseModel):
    """Base for every API schema: camelCase aliases, ORM attribute loading."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def ensure_not_null(value: Any) -> Any:
    """
    Field validator body for PATCH schemas.

    Update shapes make every field optional (omitted = leave unchanged), but
    `{"name": null}` is not "unchanged"; it would hit a NOT NULL constraint.
    Validators do not run on defaults, so only an explicit null reaches here.
    """
    if value is None:
        raise ValueError("may be omitted but not null")
    return value


# ── Path Parameters ───────────────────────────────────────────────────────
ResourceId = Annotated[
    str,
    Path(
        min_length=1,
        description="Record identifier as returned by the create endpoint",
        examples=["3f1c2a9e-5b7d-4c1e-9f0a-2b6d8e4c7a11"],
    ),
]


# ── Response Envelopes ────────────────────────────────────────────────────
class FieldError(BaseModel):
    """One violated constraint: where it was, which field, what went wrong."""

    location: str = Field(description="Request part: body, path, query, header")
    field: str = Field(description="Dotted field path within that part")
    message: str = Field(description="Human-readable explanation")


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {
            "error": "conflict",
            "message": "A category with this name or slug already exists",
            "details": {"resource": "category"},
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class ValidationErrorResponse(ErrorResponse):
    """422 body. `details.errors` lists every violation, never only the first."""

    details: Dict[str, List[FieldError]] = Field(
        description="{'errors': [...]}, one entry per violated field"
    )


class MessageResponse(BaseModel):
    message: str = Field(description="Human-readable confirmation")


class HealthResponse(APIModel):
    """Liveness probe body."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    environment: str = Field(description="Runtime mode name")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
