"""
Catalog API — Request Validation Error Shaping
===============================================

What:  Turns every request validation failure into one 422 body that lists
       all violated fields.
Why:   FastAPI validates path parameters and bodies against the route's
       Pydantic schemas before the handler runs; its default 422 body is
       Pydantic's raw error list. Clients get the shared ErrorResponse shape
       instead, with a flat, readable entry per field.
How:   `format_validation_errors()` flattens Pydantic/FastAPI error dicts;
       the two handlers are registered in main.register_exception_handlers.

Body format:
    {
        "error": "validation_error",
        "message": "Request validation failed",
        "details": {"errors": [
            {"location": "body", "field": "name", "message": "Field required"},
            {"location": "body", "field": "salePrice", "message": "Input should be a valid decimal"}
        ]},
        "request_id": "a1b2c3d4"
    }

Validated values are what the handler receives: defaults declared on the
schema (isActive, color, buyingPrice) are already applied when it runs.
"""

import logging
from typing import Any, Dict, List, Sequence

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from catalog_api.exceptions import ValidationError
from catalog_api.middleware.request_id import request_id_var
from catalog_api.responses import error_response

logger = logging.getLogger(__name__)

VALIDATION_STATUS = 422


def format_validation_errors(errors: Sequence[Dict[str, Any]]) -> List[Dict[str, str]]:
    """
    Flatten Pydantic error dicts into {location, field, message} entries.

    loc ("body", "tags", 0, "name") → location "body", field "tags.0.name".
    A loc with no field part (whole body missing or not JSON) uses the
    location itself as the field.
    """
    formatted = []
    for err in errors:
        loc = tuple(err.get("loc", ()))
        location = str(loc[0]) if loc else "request"
        field = ".".join(str(part) for part in loc[1:]) or location
        formatted.append(
            {
                "location": location,
                "field": field,
                "message": err.get("msg", "Invalid value"),
            }
        )
    return formatted


def _validation_response(errors: List[Dict[str, str]], message: str) -> JSONResponse:
    return error_response(VALIDATION_STATUS, "validation_error", message, {"errors": errors})


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Schema mismatch in path params or body, caught before the handler ran."""
    errors = format_validation_errors(exc.errors())
    logger.warning(
        "[%s] Request validation failed on %s %s: %d error(s)",
        request_id_var.get(""),
        request.method,
        request.url.path,
        len(errors),
    )
    return _validation_response(errors, "Request validation failed")


async def handle_business_validation_error(
    request: Request, exc: ValidationError
) -> JSONResponse:
    """A rule checked by a service (e.g. underivable slug), same body shape."""
    logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
    errors = [
        {
            "location": "body",
            "field": exc.field or "body",
            "message": exc.message,
        }
    ]
    return _validation_response(errors, exc.message)
