"""Integration tests for Services API."""

from pathlib import Path

import pytest
from httpx import AsyncClient

from infrastructure.media.cleanup_scheduler import BackgroundCleanupScheduler


async def _create(client: AsyncClient, **fields) -> dict:
    response = await client.post("/api/v1/services", json=fields)
    assert response.status_code == 201
    return response.json()


class TestServicesAPI:
    """Integration tests for the service catalog."""

    @pytest.mark.asyncio
    async def test_create_defaults(self, authenticated_client: AsyncClient):
        data = await _create(authenticated_client, title="Automation")

        assert data["id"].startswith("svc-")
        assert data["icon"] == "FaCode"
        assert data["number"] == "01/"
        assert data["order"] == 1

    @pytest.mark.asyncio
    async def test_list_services(self, authenticated_client: AsyncClient, client: AsyncClient):
        await _create(authenticated_client, title="One")
        await _create(authenticated_client, title="Two")

        response = await client.get("/api/v1/services")

        assert response.status_code == 200
        assert [s["title"] for s in response.json()] == ["One", "Two"]

    @pytest.mark.asyncio
    async def test_replace_all(self, authenticated_client: AsyncClient):
        keep = await _create(authenticated_client, title="Keep")
        await _create(authenticated_client, title="Drop")

        response = await authenticated_client.put(
            "/api/v1/services",
            json=[
                {"title": "New"},
                {"id": keep["id"], "title": "Kept", "icon": "FaRobot"},
            ],
        )

        assert response.status_code == 200
        data = response.json()
        assert [s["title"] for s in data] == ["New", "Kept"]
        assert [s["order"] for s in data] == [1, 2]
        assert data[1]["id"] == keep["id"]
        assert data[0]["id"].startswith("svc-")

        listing = (await authenticated_client.get("/api/v1/services")).json()
        assert [s["title"] for s in listing] == ["New", "Kept"]

    @pytest.mark.asyncio
    async def test_replace_all_requires_list(self, authenticated_client: AsyncClient):
        response = await authenticated_client.put("/api/v1/services", json={"title": "x"})

        assert response.status_code == 400
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_update_service(self, authenticated_client: AsyncClient):
        created = await _create(authenticated_client, title="Old", description="Kept")

        response = await authenticated_client.patch(
            f"/api/v1/services/{created['id']}", json={"title": "New"}
        )

        assert response.status_code == 200
        assert response.json()["title"] == "New"
        assert response.json()["description"] == "Kept"

    @pytest.mark.asyncio
    async def test_update_missing_service(self, authenticated_client: AsyncClient):
        response = await authenticated_client.patch(
            "/api/v1/services/svc-missing", json={"title": "x"}
        )

        assert response.status_code == 404
        assert response.json()["error_code"] == "SERVICE_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_delete_service(self, authenticated_client: AsyncClient):
        first = await _create(authenticated_client, title="A")
        second = await _create(authenticated_client, title="B")

        response = await authenticated_client.delete(f"/api/v1/services/{first['id']}")

        assert response.status_code == 200
        listing = (await authenticated_client.get("/api/v1/services")).json()
        assert [(s["id"], s["order"]) for s in listing] == [(second["id"], 1)]

    @pytest.mark.asyncio
    async def test_reorder_services(self, authenticated_client: AsyncClient):
        a = (await _create(authenticated_client, title="a"))["id"]
        b = (await _create(authenticated_client, title="b"))["id"]

        response = await authenticated_client.put("/api/v1/services/reorder", json=[b, a])

        assert response.status_code == 200
        assert [s["id"] for s in response.json()] == [b, a]

    @pytest.mark.asyncio
    async def test_replace_all_sweeps_dropped_icons(
        self,
        authenticated_client: AsyncClient,
        cleanup_scheduler: BackgroundCleanupScheduler,
        tmp_path: Path,
    ):
        upload = await authenticated_client.post(
            "/api/v1/upload",
            files={"file": ("icon.png", b"\x89PNG icon", "image/png")},
            data={"category": "services"},
        )
        icon = upload.json()["path"]
        await _create(authenticated_client, title="With icon", icon=icon)

        await authenticated_client.put("/api/v1/services", json=[{"title": "Plain"}])
        await cleanup_scheduler.drain()

        assert not (tmp_path / "public" / icon.lstrip("/")).exists()

    @pytest.mark.asyncio
    async def test_write_requires_auth(self, client: AsyncClient):
        response = await client.put("/api/v1/services", json=[])

        assert response.status_code == 401
