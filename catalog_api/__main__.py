"""
Entry point: `python -m catalog_api`.

Importing settings validates the environment first; on a missing or invalid
variable the process reports each problem and exits with status 1 before
uvicorn binds the port.
"""

import uvicorn

from catalog_api.config import settings


def main() -> None:
    uvicorn.run(
        "catalog_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "development",
        proxy_headers=True,
        log_config=None,  # setup_logging() in the lifespan owns logging
    )


if __name__ == "__main__":
    main()
