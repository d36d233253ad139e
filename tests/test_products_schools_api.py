"""
Catalog API — Product & School Endpoint Tests
==============================================

What:  End-to-end tests of /api/products and /api/schools.
How:   Real FastAPI app on in-memory SQLite (see conftest).

What we test:
    ✅ Product prices round-trip as exact decimals; buyingPrice defaults to 0
    ✅ Product/school deletes are hard deletes (subsequent GET → 404)
    ✅ Lists are unfiltered and newest first
    ✅ Slug derivation, re-derivation and conflicts
    ✅ 422 bodies list every invalid field; 404 for unknown ids
"""

from decimal import Decimal

import pytest


class TestProducts:

    @pytest.mark.asyncio
    async def test_create_and_fetch_product(self, client):
        response = await client.post(
            "/api/products",
            json={"name": "Wireless Mouse Pro!", "buyingPrice": "12.50", "salePrice": 19.99},
        )

        assert response.status_code == 201
        created = response.json()
        assert created["slug"] == "wireless-mouse-pro"
        assert Decimal(created["buyingPrice"]) == Decimal("12.50")
        assert Decimal(created["salePrice"]) == Decimal("19.99")
        assert created["image"] is None

        fetched = await client.get(f"/api/products/{created['id']}")
        assert fetched.status_code == 200
        assert Decimal(fetched.json()["salePrice"]) == Decimal("19.99")

    @pytest.mark.asyncio
    async def test_buying_price_defaults_to_zero(self, client):
        response = await client.post("/api/products", json={"name": "Pencil", "salePrice": "1.00"})

        assert response.status_code == 201
        assert Decimal(response.json()["buyingPrice"]) == Decimal("0")

    @pytest.mark.asyncio
    async def test_invalid_product_lists_every_field(self, client):
        response = await client.post(
            "/api/products",
            json={"buyingPrice": -5, "salePrice": "abc", "image": 42},
        )

        assert response.status_code == 422
        fields = {e["field"] for e in response.json()["details"]["errors"]}
        assert {"name", "buyingPrice", "salePrice", "image"} <= fields

    @pytest.mark.asyncio
    async def test_too_many_decimal_places_rejected(self, client):
        response = await client.post("/api/products", json={"name": "Pen", "salePrice": "1.999"})

        assert response.status_code == 422
        assert response.json()["details"]["errors"][0]["field"] == "salePrice"

    @pytest.mark.asyncio
    async def test_partial_update_keeps_other_fields(self, client):
        created = (
            await client.post(
                "/api/products",
                json={"name": "Notebook", "buyingPrice": "2.00", "salePrice": "3.50"},
            )
        ).json()

        response = await client.patch(f"/api/products/{created['id']}", json={"salePrice": "4.25"})

        assert response.status_code == 200
        updated = response.json()
        assert Decimal(updated["salePrice"]) == Decimal("4.25")
        assert Decimal(updated["buyingPrice"]) == Decimal("2.00")
        assert updated["slug"] == "notebook"

    @pytest.mark.asyncio
    async def test_null_sale_price_on_update_rejected(self, client):
        created = (await client.post("/api/products", json={"name": "Ruler", "salePrice": "1"})).json()

        response = await client.patch(f"/api/products/{created['id']}", json={"salePrice": None})

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_delete_is_permanent(self, client):
        created = (await client.post("/api/products", json={"name": "Eraser", "salePrice": "0.50"})).json()

        deleted = await client.delete(f"/api/products/{created['id']}")
        assert deleted.status_code == 200
        assert deleted.json() == {"message": "Product deleted successfully"}

        fetched = await client.get(f"/api/products/{created['id']}")
        assert fetched.status_code == 404

        again = await client.delete(f"/api/products/{created['id']}")
        assert again.status_code == 404

    @pytest.mark.asyncio
    async def test_duplicate_slug_is_conflict(self, client):
        await client.post("/api/products", json={"name": "Glue Stick", "salePrice": "1"})

        response = await client.post("/api/products", json={"name": "Glue  Stick!", "salePrice": "2"})

        assert response.status_code == 409
        assert response.json()["details"] == {"resource": "product"}

    @pytest.mark.asyncio
    async def test_list_newest_first_with_total(self, client):
        ids = []
        for name in ["A4 Paper", "Stapler", "Scissors"]:
            resp = await client.post("/api/products", json={"name": name, "salePrice": "1"})
            ids.append(resp.json()["id"])

        listed = await client.get("/api/products")

        assert [p["id"] for p in listed.json()] == list(reversed(ids))
        assert listed.headers["X-Total-Count"] == "3"


class TestSchools:

    @pytest.mark.asyncio
    async def test_school_lifecycle(self, client):
        response = await client.post(
            "/api/schools",
            json={"name": "Riverside High School", "logo": "https://cdn.example.com/riverside.png"},
        )
        assert response.status_code == 201
        school = response.json()
        assert school["slug"] == "riverside-high-school"
        assert school["logo"] == "https://cdn.example.com/riverside.png"

        renamed = await client.patch(f"/api/schools/{school['id']}", json={"name": "Riverside Academy"})
        assert renamed.status_code == 200
        assert renamed.json()["slug"] == "riverside-academy"
        assert renamed.json()["logo"] == school["logo"]

        listed = await client.get("/api/schools")
        assert [s["id"] for s in listed.json()] == [school["id"]]

        deleted = await client.delete(f"/api/schools/{school['id']}")
        assert deleted.json() == {"message": "School deleted successfully"}

        listed = await client.get("/api/schools")
        assert listed.json() == []

    @pytest.mark.asyncio
    async def test_logo_is_optional(self, client):
        response = await client.post("/api/schools", json={"name": "Hillview"})

        assert response.status_code == 201
        assert response.json()["logo"] is None

    @pytest.mark.asyncio
    async def test_duplicate_school_is_conflict(self, client):
        await client.post("/api/schools", json={"name": "Hillview"})

        response = await client.post("/api/schools", json={"name": "Hillview"})

        assert response.status_code == 409
        assert response.json()["error"] == "conflict"


class TestUnknownIds:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("resource", ["products", "schools"])
    @pytest.mark.parametrize("method", ["get", "patch", "delete"])
    async def test_unknown_id_is_not_found(self, client, resource, method):
        kwargs = {"json": {"name": "X"}} if method == "patch" else {}

        response = await getattr(client, method)(f"/api/{resource}/nope", **kwargs)

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"
