"""
Catalog API — Error Response Builder
=====================================

Every error body leaving the service, whether produced by an exception
handler or by a middleware, has the same shape:

    {"error": "...", "message": "...", "details": {...}, "request_id": "..."}

`details` is omitted when empty. `request_id` is read from the request-ID
context, so it is only empty for responses produced outside that middleware.
"""

from typing import Any, Dict, Optional

from fastapi.responses import JSONResponse

from catalog_api.exceptions import RateLimitExceededError
from catalog_api.middleware.request_id import request_id_var

GENERIC_SERVER_ERROR = "An unexpected error occurred. Please try again or contact support."


def error_response(
    status_code: int,
    error: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    content: Dict[str, Any] = {"error": error, "message": message, "request_id": request_id_var.get("")}
    if details:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def unexpected_error_response() -> JSONResponse:
    """500 for an exception nothing else handled. No exception text reaches the client."""
    return error_response(500, "internal_server_error", GENERIC_SERVER_ERROR)


def rate_limit_response(exc: RateLimitExceededError) -> JSONResponse:
    return error_response(
        429,
        "rate_limit_exceeded",
        exc.message,
        exc.context,
        headers={"Retry-After": str(exc.retry_after)},
    )
