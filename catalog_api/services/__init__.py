"""
Catalog API — Services Layer
=============================

What:  The request handlers' business side: one method per CRUD operation,
       each doing a single persistence operation and raising typed errors.
Why:   Routes stay HTTP-only; services can be unit-tested with a mocked session.

Service Inventory:
    - ResourceService (base): list/get/create/update/delete + error mapping
    - ProductService, SchoolService: hard delete
    - CategoryService: active-only listing, soft delete

Every method receives the AsyncSession explicitly (FastAPI injects it per
request), so services hold no state and are shared as module singletons.
"""
