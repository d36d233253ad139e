"""
Catalog API — API Routes Package
=================================

Route Inventory:
    - categories.py:  /api/categories[/{id}]   GET, POST, GET, PATCH, DELETE
    - products.py:    /api/products[/{id}]     same five routes
    - schools.py:     /api/schools[/{id}]      same five routes
    - health.py:      GET /health              liveness probe
    - index.py:       GET /                    welcome page listing endpoints

Design Principle:
    Routes are THIN. Each decorator is both the runtime binding and the
    OpenAPI entry (tags, summary, request schema, status → response map),
    so documentation cannot drift from behaviour. The function body only
    hands validated input to the resource's service.
"""
