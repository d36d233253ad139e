"""
Catalog API — Middleware Package
=================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (inbound order):
    Request → [CORS] → [Security Headers] → [Request ID] → [Rate Limit]
            → [Logging] → [Unhandled Error] → [GZip]
            → Route (body parsed + validated) → Handler

    1. CORS first: preflight OPTIONS is answered before anything else, and
       every later response (including 429s) carries CORS headers
    2. Security headers on every response, errors included
    3. Request ID: correlation ID for logs, headers and every error body,
       429s included
    4. Rate limit rejects abuse before a log line is spent on it
    5. Logging: method, path, status, duration with the request ID
    6. Unhandled error: an exception no handler claimed becomes the generic
       500 here, so it still passes back out through 1-5

    `validation` is not a Starlette middleware: FastAPI validates path
    params and bodies per route, and the handler registered from that module
    shapes every failure into the shared 422 body.
"""
