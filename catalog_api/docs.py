"""
Catalog API — OpenAPI Document Publisher
=========================================

What:  Builds the single OpenAPI document from every registered route and
       exports it without a running server.
Why:   The route decorators already carry summaries, request schemas and
       status → response maps; this module adds the document-level metadata
       (description, tag groups) and a way to publish the result.
How:   Replaces `app.openapi` with `build_openapi()`, which FastAPI calls
       lazily for /openapi.json, /docs (Swagger UI) and /redoc.

Offline export:
    python -m catalog_api.docs                # writes ./openapi.json
    python -m catalog_api.docs docs/api.json  # custom path
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Union

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

logger = logging.getLogger(__name__)

API_DESCRIPTION = """
Template REST API for catalog resources backed by a relational database.

Every resource exposes the same five operations:

| Method | Path | Success |
|---|---|---|
| GET | `/api/{resource}` | 200, array |
| POST | `/api/{resource}` | 201, record |
| GET | `/api/{resource}/{id}` | 200, record |
| PATCH | `/api/{resource}/{id}` | 200, record |
| DELETE | `/api/{resource}/{id}` | 200, message |

Errors share one body: `{"error", "message", "details", "request_id"}`.
Validation failures (422) list every violated field in `details.errors`.
"""

TAGS_METADATA = [
    {
        "name": "Categories",
        "description": (
            "Reference resource. Slugs derive from names, deletion is a soft "
            "delete (`isActive: false`), and lists show active categories only."
        ),
    },
    {"name": "Products", "description": "Catalog products with buying and sale prices."},
    {"name": "Schools", "description": "Schools with an optional logo."},
    {"name": "Health", "description": "Liveness probe."},
]


def build_openapi(app: FastAPI) -> Dict[str, Any]:
    """Generate (once) and cache the OpenAPI document for `app`."""
    if app.openapi_schema:
        return app.openapi_schema

    schema = get_openapi(
        title=app.title,
        version=app.version,
        description=API_DESCRIPTION,
        routes=app.routes,
        tags=TAGS_METADATA,
    )
    app.openapi_schema = schema
    return schema


def install_openapi(app: FastAPI) -> None:
    """Route FastAPI's /openapi.json generation through build_openapi()."""
    app.openapi = lambda: build_openapi(app)


def export_openapi(app: FastAPI, path: Union[str, Path]) -> Path:
    """Write the OpenAPI document of `app` as pretty-printed JSON."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(app.openapi(), indent=2, ensure_ascii=False) + "\n")
    logger.info("OpenAPI document written to %s", target.resolve())
    return target


def main() -> None:
    from catalog_api.main import create_app

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    path = sys.argv[1] if len(sys.argv) > 1 else "openapi.json"
    export_openapi(create_app(), path)


if __name__ == "__main__":
    main()
