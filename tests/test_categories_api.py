"""Category API test cases."""
import json
import pytest
from httpx import AsyncClient
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from apps.catalog.models import Category, Product


class TestListCategories:
    """GET /categorias"""

    @pytest.mark.asyncio
    async def test_first_page_of_seed_categories(self, client: AsyncClient, sample_categories):
        response = await client.get("/categorias", params={"pageNumber": 1, "pageSize": 3})

        assert response.status_code == 200
        data = response.json()
        assert data["code"] == 200
        assert [(c["id"], c["name"], c["image_url"]) for c in data["data"]] == [
            (1, "Bebidas", "bebidas.jpg"),
            (2, "Lanches", "lanches.jpg"),
            (3, "Sobremesas", "sobremesas.jpg"),
        ]

        meta = json.loads(response.headers["X-Pagination"])
        assert meta["totalCount"] >= 3
        assert meta["currentPage"] == 1
        assert meta["hasPrevious"] is False

    @pytest.mark.asyncio
    async def test_defaults_and_header(self, client: AsyncClient, many_categories):
        response = await client.get("/categorias")

        assert response.status_code == 200
        assert len(response.json()["data"]) == 10
        meta = json.loads(response.headers["X-Pagination"])
        assert meta == {
            "totalCount": 23,
            "pageSize": 10,
            "currentPage": 1,
            "totalPages": 3,
            "hasNext": True,
            "hasPrevious": False,
        }

    @pytest.mark.asyncio
    async def test_last_page(self, client: AsyncClient, many_categories):
        response = await client.get("/categorias", params={"pageNumber": 3, "pageSize": 10})

        assert [c["id"] for c in response.json()["data"]] == [21, 22, 23]
        meta = json.loads(response.headers["X-Pagination"])
        assert meta["hasNext"] is False
        assert meta["hasPrevious"] is True

    @pytest.mark.asyncio
    async def test_out_of_range_page(self, client: AsyncClient, many_categories):
        response = await client.get("/categorias", params={"pageNumber": 9, "pageSize": 10})

        assert response.status_code == 200
        assert response.json()["data"] == []
        meta = json.loads(response.headers["X-Pagination"])
        assert meta["totalCount"] == 23
        assert meta["totalPages"] == 3

    @pytest.mark.asyncio
    async def test_page_size_capped(self, client: AsyncClient, many_categories):
        response = await client.get("/categorias", params={"pageSize": 1000})

        meta = json.loads(response.headers["X-Pagination"])
        assert meta["pageSize"] == 50
        assert len(response.json()["data"]) == 23

    @pytest.mark.asyncio
    async def test_zero_page_size_is_bad_request(self, client: AsyncClient, sample_categories):
        response = await client.get("/categorias", params={"pageSize": 0})

        assert response.status_code == 400
        assert response.json()["code"] == 400

    @pytest.mark.asyncio
    async def test_with_products(self, client: AsyncClient, sample_products):
        response = await client.get("/categorias/produtos", params={"pageSize": 2})

        assert response.status_code == 200
        data = response.json()["data"]
        assert [c["name"] for c in data] == ["Bebidas", "Lanches"]
        assert [p["name"] for p in data[0]["products"]] == ["Coca-Cola Zero"]
        assert data[1]["products"][0]["category_id"] == 2
        meta = json.loads(response.headers["X-Pagination"])
        assert meta["totalPages"] == 2
        assert meta["hasNext"] is True


class TestGetCategory:
    """GET /categorias/{id}"""

    @pytest.mark.asyncio
    async def test_found(self, client: AsyncClient, sample_categories):
        response = await client.get("/categorias/2")

        assert response.status_code == 200
        assert response.json()["data"] == {"id": 2, "name": "Lanches", "image_url": "lanches.jpg"}

    @pytest.mark.asyncio
    async def test_not_found(self, client: AsyncClient, sample_categories):
        response = await client.get("/categorias/9999999")

        assert response.status_code == 404
        data = response.json()
        assert data["code"] == 404
        assert "9999999" in data["message"]


class TestCreateCategory:
    """POST /categorias"""

    @pytest.mark.asyncio
    async def test_create_then_fetch(self, client: AsyncClient, sample_categories):
        payload = {"name": "Unit Test Category", "image_url": "unittest.jpg"}
        response = await client.post("/categorias", json=payload)

        assert response.status_code == 201
        created = response.json()["data"]
        assert created["id"] is not None
        assert response.headers["Location"].endswith(f"/categorias/{created['id']}")

        fetched = (await client.get(f"/categorias/{created['id']}")).json()["data"]
        assert fetched == {"id": created["id"], **payload}

    @pytest.mark.asyncio
    async def test_missing_payload(self, client: AsyncClient):
        response = await client.post("/categorias")

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_invalid_payload(self, client: AsyncClient, async_session: AsyncSession):
        response = await client.post("/categorias", json={"name": "", "image_url": "x" * 301})

        assert response.status_code == 400
        data = response.json()
        assert {v["field"] for v in data["data"]} == {"name", "image_url"}

        result = await async_session.exec(select(Category))
        assert result.all() == []


class TestUpdateCategory:
    """PUT /categorias/{id}"""

    @pytest.mark.asyncio
    async def test_update(self, client: AsyncClient, sample_categories):
        payload = {"id": 2, "name": "Updated Category", "image_url": "lanches.jpg"}
        response = await client.put("/categorias/2", json=payload)

        assert response.status_code == 200
        assert response.json()["data"] == payload
        fetched = (await client.get("/categorias/2")).json()["data"]
        assert fetched["name"] == "Updated Category"

    @pytest.mark.asyncio
    async def test_mismatched_id_is_bad_request_without_write(self, client: AsyncClient, sample_categories):
        response = await client.put("/categorias/2", json={"id": 3, "name": "Other", "image_url": "o.jpg"})

        assert response.status_code == 400
        assert "(2)" in response.json()["message"]
        for category_id, name in ((2, "Lanches"), (3, "Sobremesas")):
            fetched = (await client.get(f"/categorias/{category_id}")).json()["data"]
            assert fetched["name"] == name

    @pytest.mark.asyncio
    async def test_missing_payload(self, client: AsyncClient, sample_categories):
        response = await client.put("/categorias/2")

        assert response.status_code == 400
        assert response.json()["message"] == "Category payload is required"

    @pytest.mark.asyncio
    async def test_unknown_id(self, client: AsyncClient, sample_categories):
        response = await client.put("/categorias/99", json={"id": 99, "name": "Ghost", "image_url": "g.jpg"})

        assert response.status_code == 404


class TestDeleteCategory:
    """DELETE /categorias/{id}"""

    @pytest.mark.asyncio
    async def test_delete_returns_deleted(self, client: AsyncClient, sample_categories):
        response = await client.delete("/categorias/3")

        assert response.status_code == 200
        assert response.json()["data"]["name"] == "Sobremesas"
        assert (await client.get("/categorias/3")).status_code == 404

    @pytest.mark.asyncio
    async def test_delete_cascades_to_products(
        self,
        client: AsyncClient,
        async_session: AsyncSession,
        sample_products
    ):
        response = await client.delete("/categorias/1")

        assert response.status_code == 200
        result = await async_session.exec(select(Product).where(Product.category_id == 1))
        assert result.all() == []

    @pytest.mark.asyncio
    async def test_delete_unknown_id(self, client: AsyncClient, sample_categories):
        response = await client.delete("/categorias/424242")

        assert response.status_code == 404
        assert response.json()["code"] == 404
