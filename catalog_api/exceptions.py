"""
Catalog API — Custom Exception Hierarchy
=========================================

What:  Application-specific exceptions for each error scenario.
Why:   Targeted handling with the right HTTP status and a message that is
       safe to show to clients. Internal details stay in `context` and are
       logged, never returned.
How:   Services raise these; global handlers registered in main.py turn them
       into structured JSON error responses.

Exception Hierarchy:
    CatalogAPIError (base)
    ├── ValidationError          → 422 Unprocessable Entity
    ├── NotFoundError            → 404 Not Found
    ├── ConflictError            → 409 Conflict (unique field already taken)
    ├── DatabaseError            → 500 Internal Server Error
    └── RateLimitExceededError   → 429 Too Many Requests

    ConfigurationError is deliberately outside the hierarchy: it is raised
    before the app exists and terminates the process instead of producing
    a response.
"""

from typing import Any, Dict, List, Optional


class CatalogAPIError(Exception):
    """
    Base exception for all Catalog API application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(CatalogAPIError):
    """
    Raised when input passes schema validation but breaks a business rule.

    When:    A name that yields an empty slug, for example "!!!".
    HTTP:    422 Unprocessable Entity, same body shape as schema failures so
             clients parse one format.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(CatalogAPIError):
    """
    Raised when a requested resource does not exist.

    SQLAlchemy returns None for missing rows; services convert that None into
    this exception so routes never deal with it.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class ConflictError(CatalogAPIError):
    """
    Raised when a write would violate a uniqueness constraint.

    What:    The typed form of the database's unique-violation error.
    When:    Creating or renaming a record onto a name/slug that is taken.
    HTTP:    409 Conflict
    """

    def __init__(
        self,
        resource: str = "resource",
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        super().__init__(
            message=message or f"A {resource} with the same unique field already exists",
            context=ctx,
        )


class DatabaseError(CatalogAPIError):
    """
    Raised when database operations fail unexpectedly.

    Security Note:
        The message returned to the client is always generic. The original
        exception type is kept in `context` and logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class RateLimitExceededError(CatalogAPIError):
    """Raised when a client exceeds the per-IP request rate limit (HTTP 429)."""

    def __init__(
        self,
        retry_after: int = 60,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = (
            f"Rate limit exceeded. Please wait {retry_after} seconds before making more requests."
        )
        ctx = context or {}
        ctx["retry_after"] = retry_after
        super().__init__(message=message, context=ctx)
        self.retry_after = retry_after


class ConfigurationError(Exception):
    """
    Raised when environment configuration is missing or invalid at startup.

    Attributes:
        problems: One human-readable line per offending variable.
    """

    def __init__(self, problems: List[str]):
        self.problems = problems
        super().__init__(
            "Configuration validation failed:\n" + "\n".join(f"  - {p}" for p in problems)
        )
