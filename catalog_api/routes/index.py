"""
Welcome page at `/`.

Lists every documented route of the running app, grouped by tag, with links
to the interactive docs. Built from the same OpenAPI document served at
`/openapi.json`, so the page and the docs always agree.
"""

from collections import defaultdict
from html import escape
from typing import Dict, List, Tuple

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from catalog_api import __version__

router = APIRouter()

_PAGE = """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{title}</title>
  <style>
    body {{ font-family: system-ui, sans-serif; max-width: 48rem; margin: 3rem auto; color: #1f2937; }}
    code {{ background: #f3f4f6; padding: 0.1rem 0.3rem; border-radius: 4px; }}
    .method {{ display: inline-block; width: 4.5rem; font-weight: 600; }}
    li {{ margin: 0.3rem 0; }}
  </style>
</head>
<body>
  <h1>{title} <small>v{version}</small></h1>
  <p>Interactive documentation: <a href="{docs_url}">Swagger UI</a> &middot;
     <a href="{redoc_url}">ReDoc</a> &middot; <a href="{openapi_url}">OpenAPI JSON</a></p>
  {sections}
</body>
</html>
"""


def collect_endpoints(request: Request) -> Dict[str, List[Tuple[str, str, str]]]:
    """{tag: [(method, path, summary), ...]} read from the app's OpenAPI document."""
    grouped: Dict[str, List[Tuple[str, str, str]]] = defaultdict(list)
    for path, operations in request.app.openapi()["paths"].items():
        for method, operation in operations.items():
            tags = operation.get("tags") or ["Other"]
            summary = operation.get("summary") or operation.get("operationId", "")
            grouped[tags[0]].append((method.upper(), path, summary))
    return grouped


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def welcome(request: Request) -> HTMLResponse:
    app = request.app
    sections = []
    for tag, endpoints in collect_endpoints(request).items():
        items = "\n".join(
            f'<li><span class="method">{escape(method)}</span>'
            f"<code>{escape(path)}</code> {escape(summary)}</li>"
            for method, path, summary in endpoints
        )
        sections.append(f"<h2>{escape(tag)}</h2>\n<ul>\n{items}\n</ul>")

    return HTMLResponse(
        _PAGE.format(
            title=escape(app.title),
            version=__version__,
            docs_url=app.docs_url,
            redoc_url=app.redoc_url,
            openapi_url=app.openapi_url,
            sections="\n".join(sections),
        )
    )
