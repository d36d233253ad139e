"""
Catalog API — FastAPI Application Factory
==========================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes middleware registration, exception handlers, route
       mounting, documentation and lifecycle management in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   uvicorn (`catalog_api.main:app`), `python -m catalog_api`, and tests.

Application Architecture:
    ┌─────────────────────────────────────────────────────────────┐
    │                        FastAPI App                          │
    │                                                             │
    │  Middleware Chain (inbound):                                │
    │  CORS → Security Headers → Request ID → Rate Limit          │
    │       → Logging → Unhandled Error → GZip                    │
    │                                                             │
    │  Routes:                                                    │
    │  /api/categories  /api/products  /api/schools               │
    │  /health  /  /docs  /redoc  /openapi.json                   │
    │                                                             │
    │  Exception Handlers:                                        │
    │  Validation→422 │ NotFound→404 │ Conflict→409 │ DB→500      │
    └─────────────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, log the effective configuration
    Shutdown: dispose the database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog_api import __version__
from catalog_api.config import settings
from catalog_api.database import dispose_engine
from catalog_api.docs import install_openapi
from catalog_api.exceptions import (
    CatalogAPIError,
    ConflictError,
    DatabaseError,
    NotFoundError,
    RateLimitExceededError,
    ValidationError,
)
from catalog_api.middleware.errors import UnhandledErrorMiddleware
from catalog_api.middleware.logging import RequestLoggingMiddleware
from catalog_api.middleware.rate_limit import RateLimitMiddleware
from catalog_api.middleware.request_id import RequestIDMiddleware, request_id_var
from catalog_api.middleware.security_headers import SecurityHeadersMiddleware
from catalog_api.middleware.validation import (
    handle_business_validation_error,
    handle_request_validation_error,
)
from catalog_api.responses import error_response, rate_limit_response, unexpected_error_response
from catalog_api.routes import categories, health, index, products, schools

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: 2024-01-15T12:00:00 [INFO] catalog_api.access: GET /api/categories 200 ...
    Output: stdout (containers capture it)
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Third-party loggers are chatty at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup/shutdown around the serving period.

    Configuration has already been validated by the time this runs: the
    settings module exits the process on invalid environment before the app
    object can even be imported.
    """
    setup_logging()
    logger.info("=" * 60)
    logger.info("Catalog API v%s starting (%s)", __version__, settings.environment)
    logger.info("Allowed origins: %s", ", ".join(settings.cors_origins_list))
    logger.info("Server ready at http://%s:%d", settings.host, settings.port)
    logger.info("API docs: http://%s:%d%s", settings.host, settings.port, app.docs_url)
    logger.info("=" * 60)

    yield

    logger.info("Catalog API shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and the shared error body.

    Handler hierarchy:
        RequestValidationError  → 422 (schema mismatch, every field listed)
        ValidationError         → 422 (business rule, same body)
        NotFoundError           → 404
        ConflictError           → 409
        RateLimitExceededError  → 429 (Retry-After header)
        DatabaseError           → 500 (generic message; details logged)
        CatalogAPIError (base)  → 500
        HTTPException           → its own status (unknown route, wrong method)
        Exception (fallback)    → 500 (no stack trace in the response)
    """
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(ValidationError, handle_business_validation_error)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return error_response(404, "not_found", exc.message)

    @app.exception_handler(ConflictError)
    async def handle_conflict(request: Request, exc: ConflictError):
        logger.warning("[%s] Conflict: %s", request_id_var.get(""), exc.message)
        return error_response(409, "conflict", exc.message, {"resource": exc.context["resource"]})

    @app.exception_handler(RateLimitExceededError)
    async def handle_rate_limit(request: Request, exc: RateLimitExceededError):
        return rate_limit_response(exc)

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return error_response(
            500, "server_error", "An internal error occurred. Please try again later."
        )

    @app.exception_handler(CatalogAPIError)
    async def handle_application_error(request: Request, exc: CatalogAPIError):
        logger.error("[%s] Application error: %s", request_id_var.get(""), exc.message)
        return error_response(500, "server_error", exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        error = "not_found" if exc.status_code == 404 else "http_error"
        response = error_response(exc.status_code, error, str(exc.detail))
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Last resort for exceptions raised outside UnhandledErrorMiddleware
        (i.e. in an outer middleware). Stack trace goes to the log only.
        """
        logger.error(
            "[%s] Unexpected error: %s",
            request_id_var.get(""),
            str(exc),
            exc_info=True,
        )
        return unexpected_error_response()


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Each call builds an independent app (own rate-limit state, own cached
    OpenAPI document), which is what the tests rely on.
    """
    app = FastAPI(
        title="Catalog API",
        description="REST CRUD API for products, schools and categories.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Starlette runs middleware in REVERSE order of addition: the last one
    # added sees the request first. Added here innermost → outermost.
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(UnhandledErrorMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RateLimitMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Total-Count", "Retry-After"],
    )

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(categories.router)
    app.include_router(products.router)
    app.include_router(schools.router)
    app.include_router(health.router)
    app.include_router(index.router)

    # ── Documentation ─────────────────────────────────────────────────────
    install_openapi(app)

    return app


app = create_app()
