"""
Catalog API — Middleware Tests
===============================

What we test:
    ✅ Rate limiter rejects the request past the limit with 429 + Retry-After
    ✅ Rate limiter leaves excluded paths alone
    ✅ Security headers on every response; HSTS only when enabled
    ✅ X-Request-ID generated or echoed, and carried into error bodies
    ✅ Client-supplied request IDs that are too long or unsafe are replaced
    ✅ Full-stack 429 carries the request ID and security headers
    ✅ Validation error flattening
"""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from catalog_api.config import settings
from catalog_api.middleware.rate_limit import RateLimitMiddleware
from catalog_api.middleware.request_id import resolve_request_id
from catalog_api.middleware.security_headers import SecurityHeadersMiddleware
from catalog_api.middleware.validation import format_validation_errors


def _small_app() -> FastAPI:
    app = FastAPI()

    @app.get("/ping")
    async def ping():
        return {"pong": True}

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    return app


def _client(app: FastAPI) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


class TestRateLimitMiddleware:

    @pytest.mark.asyncio
    async def test_rejects_after_limit(self):
        app = _small_app()
        app.add_middleware(RateLimitMiddleware, max_requests=2, window_seconds=60)

        async with _client(app) as client:
            assert (await client.get("/ping")).status_code == 200
            assert (await client.get("/ping")).status_code == 200
            response = await client.get("/ping")

        assert response.status_code == 429
        assert 0 < int(response.headers["Retry-After"]) <= 61
        body = response.json()
        assert body["error"] == "rate_limit_exceeded"
        assert body["details"]["retry_after"] == int(response.headers["Retry-After"])

    @pytest.mark.asyncio
    async def test_excluded_paths_not_counted(self):
        app = _small_app()
        app.add_middleware(RateLimitMiddleware, max_requests=1, window_seconds=60)

        async with _client(app) as client:
            for _ in range(5):
                assert (await client.get("/health")).status_code == 200
            assert (await client.get("/ping")).status_code == 200

    @pytest.mark.asyncio
    async def test_rejection_carries_request_id_and_security_headers(self, app, client, monkeypatch):
        monkeypatch.setattr(settings, "rate_limit_requests", 2)

        for _ in range(2):
            assert (await client.get("/api/schools")).status_code == 200
        response = await client.get("/api/schools", headers={"X-Request-ID": "limit-7"})

        assert response.status_code == 429
        assert response.headers["X-Request-ID"] == "limit-7"
        assert response.json()["request_id"] == "limit-7"
        assert response.headers["X-Content-Type-Options"] == "nosniff"

    def test_defaults_come_from_settings(self):
        middleware = RateLimitMiddleware(_small_app())

        assert middleware.max_requests == settings.rate_limit_requests
        assert middleware.window_seconds == settings.rate_limit_window


class TestSecurityHeadersMiddleware:

    @pytest.mark.asyncio
    async def test_headers_present_without_hsts(self):
        app = _small_app()
        app.add_middleware(SecurityHeadersMiddleware, enable_hsts=False)

        async with _client(app) as client:
            response = await client.get("/ping")

        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
        assert "Strict-Transport-Security" not in response.headers

    @pytest.mark.asyncio
    async def test_hsts_when_enabled(self):
        app = _small_app()
        app.add_middleware(SecurityHeadersMiddleware, enable_hsts=True)

        async with _client(app) as client:
            response = await client.get("/ping")

        assert response.headers["Strict-Transport-Security"].startswith("max-age=")


class TestRequestID:

    @pytest.mark.asyncio
    async def test_generated_when_absent(self, client):
        response = await client.get("/api/categories")

        assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_echoed_and_used_in_error_body(self, client):
        response = await client.get(
            "/api/categories/missing", headers={"X-Request-ID": "trace-123"}
        )

        assert response.headers["X-Request-ID"] == "trace-123"
        assert response.json()["request_id"] == "trace-123"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("supplied", ["x" * 65, "bad id", "<script>alert(1)</script>"])
    async def test_unsafe_client_id_replaced(self, client, supplied):
        response = await client.get("/api/categories/missing", headers={"X-Request-ID": supplied})

        rid = response.headers["X-Request-ID"]
        assert rid != supplied
        assert len(rid) == 8
        assert response.json()["request_id"] == rid

    @pytest.mark.parametrize(
        "supplied,kept",
        [
            ("trace-123", True),
            ("a1b2.C3_d4", True),
            ("x" * 64, True),
            ("x" * 65, False),
            ("two words", False),
            ("line\nbreak", False),
            ("", False),
            (None, False),
        ],
    )
    def test_resolve_request_id(self, supplied, kept):
        rid = resolve_request_id(supplied)

        assert (rid == supplied) is kept
        if not kept:
            assert len(rid) == 8

    @pytest.mark.asyncio
    async def test_full_app_sets_security_headers(self, client):
        response = await client.get("/api/schools")

        assert response.headers["X-Content-Type-Options"] == "nosniff"


class TestFormatValidationErrors:

    def test_body_field(self):
        errors = [{"loc": ("body", "salePrice"), "msg": "Input should be a valid decimal"}]

        assert format_validation_errors(errors) == [
            {"location": "body", "field": "salePrice", "message": "Input should be a valid decimal"}
        ]

    def test_nested_field_path(self):
        errors = [{"loc": ("body", "tags", 0, "name"), "msg": "Field required"}]

        assert format_validation_errors(errors)[0]["field"] == "tags.0.name"

    def test_location_only(self):
        errors = [{"loc": ("body",), "msg": "Field required"}]

        assert format_validation_errors(errors)[0] == {
            "location": "body",
            "field": "body",
            "message": "Field required",
        }

    def test_keeps_every_error(self):
        errors = [
            {"loc": ("body", "name"), "msg": "Field required"},
            {"loc": ("path", "category_id"), "msg": "String should have at least 1 character"},
        ]

        assert [e["field"] for e in format_validation_errors(errors)] == ["name", "category_id"]
