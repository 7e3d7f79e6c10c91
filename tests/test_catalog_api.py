"""
Tests for the catalog API endpoints and the typed CatalogApiClient.
"""
import asyncio

import httpx
import pytest

from eshop.integrations.catalog_client import CatalogApiClient
from eshop.integrations.context import RequestContext


class TestCatalogEndpoints:

    @pytest.mark.asyncio
    async def test_list_genders(self, api_client, seeded_genders):
        response = await api_client.get("/api/v1/catalog/genders")

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 3
        assert [item["gender"] for item in body["items"]] == ["Women", "Men", "Unisex"]

    @pytest.mark.asyncio
    async def test_list_genders_rejects_bad_pagination(self, api_client):
        response = await api_client.get("/api/v1/catalog/genders", params={"limit": 0})

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_get_gender(self, api_client, seeded_genders):
        gender = seeded_genders[0]

        response = await api_client.get(f"/api/v1/catalog/genders/{gender.id}")

        assert response.status_code == 200
        assert response.json() == {"id": gender.id, "gender": "Women"}

    @pytest.mark.asyncio
    async def test_get_missing_gender_returns_404(self, api_client):
        response = await api_client.get("/api/v1/catalog/genders/4242")

        assert response.status_code == 404
        assert response.json() == {"detail": "Catalog gender 4242 not found"}

    @pytest.mark.asyncio
    async def test_correlation_id_is_echoed(self, api_client):
        response = await api_client.get("/health", headers={"X-Correlation-ID": "corr-1"})

        assert response.status_code == 200
        assert response.headers["X-Correlation-ID"] == "corr-1"

    @pytest.mark.asyncio
    async def test_correlation_id_is_generated(self, api_client):
        response = await api_client.get("/")

        assert response.headers["X-Correlation-ID"]


class TestCatalogApiClient:

    @pytest.fixture
    async def catalog_client(self, catalog_app):
        client = CatalogApiClient("http://catalog", transport=httpx.ASGITransport(app=catalog_app))
        yield client
        await client.aclose()

    @pytest.mark.asyncio
    async def test_list_genders_through_pipeline(self, catalog_client, seeded_genders):
        result = await catalog_client.list_genders(
            context=RequestContext(tokens={"access_token": "T"})
        )

        assert result.total == 3
        assert [item.gender for item in result.items] == ["Women", "Men", "Unisex"]

    @pytest.mark.asyncio
    async def test_get_gender(self, catalog_client, seeded_genders):
        result = await catalog_client.get_gender(seeded_genders[2].id)

        assert result.gender == "Unisex"

    @pytest.mark.asyncio
    async def test_get_missing_gender_returns_none(self, catalog_client):
        assert await catalog_client.get_gender(4242) is None

    @pytest.mark.asyncio
    async def test_cancelled_call_raises_status_error(self, catalog_client):
        cancellation = asyncio.Event()
        cancellation.set()

        with pytest.raises(httpx.HTTPStatusError) as exc_info:
            await catalog_client.list_genders(cancellation=cancellation)

        assert exc_info.value.response.status_code == 408
