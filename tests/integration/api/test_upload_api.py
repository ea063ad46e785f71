"""Integration tests for upload and media maintenance endpoints."""

from pathlib import Path

import pytest
from httpx import AsyncClient

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16


def _on_disk(tmp_path: Path, reference: str) -> Path:
    return tmp_path / "public" / reference.lstrip("/")


class TestUploadAPI:
    @pytest.mark.asyncio
    async def test_upload_image(self, authenticated_client: AsyncClient, tmp_path: Path):
        response = await authenticated_client.post(
            "/api/v1/upload",
            files={"file": ("photo.png", PNG_BYTES, "image/png")},
            data={"category": "projects"},
        )

        assert response.status_code == 200
        path = response.json()["path"]
        assert path.startswith("/images/projects/")
        assert path.endswith(".png")
        assert _on_disk(tmp_path, path).read_bytes() == PNG_BYTES

    @pytest.mark.asyncio
    async def test_default_folder(self, authenticated_client: AsyncClient):
        response = await authenticated_client.post(
            "/api/v1/upload", files={"file": ("photo.webp", b"webp", "image/webp")}
        )

        assert response.json()["path"].startswith("/images/projects/")

    @pytest.mark.asyncio
    async def test_pdf_only_in_attachments(self, authenticated_client: AsyncClient):
        rejected = await authenticated_client.post(
            "/api/v1/upload",
            files={"file": ("cv.pdf", b"%PDF-1.7", "application/pdf")},
            data={"category": "projects"},
        )
        accepted = await authenticated_client.post(
            "/api/v1/upload",
            files={"file": ("cv.pdf", b"%PDF-1.7", "application/pdf")},
            data={"category": "attachments"},
        )

        assert rejected.status_code == 400
        assert rejected.json()["error_code"] == "UPLOAD_REJECTED"
        assert accepted.status_code == 200
        assert accepted.json()["path"].endswith(".pdf")

    @pytest.mark.asyncio
    async def test_too_large(self, authenticated_client: AsyncClient):
        response = await authenticated_client.post(
            "/api/v1/upload",
            files={"file": ("big.png", b"\x00" * (1024 * 1024 + 1), "image/png")},
        )

        assert response.status_code == 400
        assert response.json()["error_code"] == "UPLOAD_REJECTED"

    @pytest.mark.asyncio
    async def test_missing_file(self, authenticated_client: AsyncClient):
        response = await authenticated_client.post(
            "/api/v1/upload", data={"category": "projects"}
        )

        assert response.status_code == 400
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_requires_auth(self, client: AsyncClient, tmp_path: Path):
        response = await client.post(
            "/api/v1/upload", files={"file": ("photo.png", PNG_BYTES, "image/png")}
        )

        assert response.status_code == 401
        assert not (tmp_path / "public" / "images").exists()


class TestBatchUploadAPI:
    @pytest.mark.asyncio
    async def test_partial_failure(self, authenticated_client: AsyncClient):
        response = await authenticated_client.post(
            "/api/v1/upload/batch",
            files=[
                ("files", ("a.png", PNG_BYTES, "image/png")),
                ("files", ("notes.txt", b"hello", "text/plain")),
                ("files", ("b.jpg", b"jpeg", "image/jpeg")),
            ],
            data={"category": "projects"},
        )

        assert response.status_code == 200
        data = response.json()
        assert len(data["uploaded"]) == 2
        assert data["failed"] == [{"filename": "notes.txt", "error": "Invalid file type"}]

    @pytest.mark.asyncio
    async def test_no_files(self, authenticated_client: AsyncClient):
        response = await authenticated_client.post(
            "/api/v1/upload/batch", data={"category": "projects"}
        )

        assert response.status_code == 400


class TestMediaCleanupAPI:
    @pytest.mark.asyncio
    async def test_cleanup_removes_only_unreferenced(
        self, authenticated_client: AsyncClient, tmp_path: Path
    ):
        used = (
            await authenticated_client.post(
                "/api/v1/upload", files={"file": ("used.png", PNG_BYTES, "image/png")}
            )
        ).json()["path"]
        orphan = (
            await authenticated_client.post(
                "/api/v1/upload", files={"file": ("orphan.png", PNG_BYTES, "image/png")}
            )
        ).json()["path"]
        await authenticated_client.post(
            "/api/v1/projects", json={"title": "Uses image", "gallery": [used]}
        )
        placeholder = _on_disk(tmp_path, "/images/projects/placeholder-2.svg")
        placeholder.write_text("<svg/>")

        response = await authenticated_client.post("/api/v1/media/cleanup")

        assert response.status_code == 200
        assert response.json() == {"deleted": [orphan], "deletedCount": 1}
        assert _on_disk(tmp_path, used).exists()
        assert not _on_disk(tmp_path, orphan).exists()
        assert placeholder.exists()

    @pytest.mark.asyncio
    async def test_cleanup_requires_auth(self, client: AsyncClient):
        response = await client.post("/api/v1/media/cleanup")

        assert response.status_code == 401
