"""
Catalog API — Unhandled Error Middleware
=========================================

What:  Turns an exception no handler claimed into the generic 500 body.
Why:   Starlette renders such exceptions in its outermost ServerErrorMiddleware,
       outside every user middleware, so the response would miss the request
       ID, the security headers and CORS. Caught here, the 500 travels back out
       through all of them like any other response.
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from catalog_api.middleware.request_id import request_id_var
from catalog_api.responses import unexpected_error_response

logger = logging.getLogger(__name__)


class UnhandledErrorMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            logger.error(
                "[%s] Unexpected error on %s %s: %s",
                request_id_var.get(""),
                request.method,
                request.url.path,
                str(e),
                exc_info=True,
            )
            return unexpected_error_response()
