"""
Catalog API — Request ID Middleware
====================================

What:  Assigns a short correlation ID to each request and echoes it back.
Why:   Every log line and every error body of one request share the same ID,
       so a client-reported ID leads straight to the server-side logs.
How:   Honors an incoming X-Request-ID when it is a short token of safe
       characters, otherwise generates one; stores it in a ContextVar (for
       loggers and exception handlers) and request.state (for route handlers);
       adds it to the response headers.
"""

import re
import uuid
from contextvars import ContextVar
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

# Client-supplied IDs end up in logs and response bodies
VALID_REQUEST_ID = re.compile(r"[A-Za-z0-9._-]{1,64}")


def resolve_request_id(header_value: Optional[str]) -> str:
    """The client's ID when it is a short safe token, otherwise a fresh one."""
    if header_value and VALID_REQUEST_ID.fullmatch(header_value):
        return header_value
    # 8 hex chars: short enough to read in logs, plenty for correlation
    return str(uuid.uuid4())[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = resolve_request_id(request.headers.get("X-Request-ID"))

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        return response
