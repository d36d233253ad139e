"""
Pydantic request/response schemas: the API contract.

Per resource:
    <Resource>Create  POST body (server-assigned fields omitted)
    <Resource>Update  PATCH body (every field optional)
    <Resource>Read    response record
Shared error, message and health shapes live in `common`.
"""
