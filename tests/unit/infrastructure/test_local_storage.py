"""Unit tests for LocalMediaStorage."""

from pathlib import Path

import pytest

from core.exceptions import StorageError
from infrastructure.media.local_storage import LocalMediaStorage


@pytest.fixture
def storage(tmp_path: Path) -> LocalMediaStorage:
    return LocalMediaStorage(tmp_path)


def test_owns_only_images_references(storage: LocalMediaStorage):
    assert storage.owns("/images/projects/a.png")
    assert not storage.owns("https://cdn.example.com/a.png")
    assert not storage.owns("FaCode")


@pytest.mark.asyncio
async def test_upload_writes_under_images(storage: LocalMediaStorage, tmp_path: Path):
    reference = await storage.upload("projects/a.png", b"data", "image/png")

    assert reference == "/images/projects/a.png"
    assert (tmp_path / "images" / "projects" / "a.png").read_bytes() == b"data"


@pytest.mark.asyncio
async def test_upload_rejects_escaping_path(storage: LocalMediaStorage):
    with pytest.raises(StorageError):
        await storage.upload("../outside.png", b"data", "image/png")


@pytest.mark.asyncio
async def test_delete_returns_removed(storage: LocalMediaStorage, tmp_path: Path):
    await storage.upload("projects/a.png", b"data", "image/png")

    removed = await storage.delete(
        ["/images/projects/a.png", "/images/projects/missing.png", "/images/../secret.txt"]
    )

    assert removed == ["/images/projects/a.png"]
    assert not (tmp_path / "images" / "projects" / "a.png").exists()


@pytest.mark.asyncio
async def test_list(storage: LocalMediaStorage):
    await storage.upload("projects/a.png", b"a", "image/png")
    await storage.upload("services/b.png", b"b", "image/png")

    assert await storage.list_objects() == ["/images/projects/a.png", "/images/services/b.png"]
    assert await storage.list_objects("services") == ["/images/services/b.png"]
    assert await storage.list_objects("nothing") == []


def test_key_ignores_query_string(storage: LocalMediaStorage):
    assert storage.key("/images/projects/a.png?v=3") == "projects/a.png"
    assert storage.key(" /images/projects/a.png ") == "projects/a.png"
    assert storage.key("/images/") is None
    assert storage.key("https://cdn.example.com/a.png") is None
