"""
Catalog API — Application Package Initializer
==============================================

What: Marks the `catalog_api` directory as a Python package.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The service follows the same layered shape for every resource:

    ┌─────────────────────────────────────┐
    │      Routes (API + OpenAPI docs)    │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │       Services (CRUD handlers)      │  ← One persistence operation each
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Adding a resource means adding one file in each layer; nothing else changes.
"""

__version__ = "1.0.0"
