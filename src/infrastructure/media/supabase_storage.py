"""Media storage in a Supabase Storage bucket, via its REST API."""

from typing import Any, Sequence
from urllib.parse import quote

import httpx
import structlog

from core.exceptions import MediaCleanupFailure, StorageError

logger = structlog.get_logger()

LEGACY_PREFIX = "/images/"
LIST_PAGE_SIZE = 1000


class SupabaseMediaStorage:
    """Stores media as public objects in ``bucket``.

    References are public object URLs. Legacy ``/images/<path>`` references
    left over from filesystem storage map to the same object path.
    """

    def __init__(
        self,
        supabase_url: str,
        service_role_key: str,
        bucket: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = supabase_url.rstrip("/")
        self._bucket = bucket
        self._public_prefix = f"{self._base_url}/storage/v1/object/public/{bucket}/"
        self._headers = {
            "Authorization": f"Bearer {service_role_key}",
            "apikey": service_role_key,
        }
        self._timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=f"{self._base_url}/storage/v1",
            headers=self._headers,
            timeout=self._timeout,
            transport=self._transport,
        )

    def public_url(self, path: str) -> str:
        return f"{self._public_prefix}{path}"

    def key(self, reference: str) -> str | None:
        """Bucket-relative object path of ``reference``, or None if not ours."""
        if not isinstance(reference, str):
            return None
        value = reference.strip().split("?", 1)[0]
        if value.startswith(self._public_prefix):
            return value[len(self._public_prefix):] or None
        if value.startswith(LEGACY_PREFIX):
            return value[len(LEGACY_PREFIX):] or None
        return None

    def owns(self, reference: str) -> bool:
        return self.key(reference) is not None

    async def upload(self, path: str, data: bytes, content_type: str) -> str:
        async with self._client() as client:
            try:
                response = await client.post(
                    f"/object/{self._bucket}/{quote(path)}",
                    content=data,
                    headers={"Content-Type": content_type, "x-upsert": "false"},
                )
                response.raise_for_status()
            except httpx.HTTPError as exc:
                logger.error("media_upload_failed", path=path, error=str(exc))
                raise StorageError("Upload failed") from exc
        return self.public_url(path)

    async def delete(self, references: Sequence[str]) -> list[str]:
        paths = {
            path: reference.strip()
            for reference in references
            if (path := self.key(reference)) is not None
        }
        if not paths:
            return []

        async with self._client() as client:
            try:
                response = await client.request(
                    "DELETE",
                    f"/object/{self._bucket}",
                    json={"prefixes": list(paths)},
                )
                response.raise_for_status()
            except httpx.HTTPError as exc:
                raise MediaCleanupFailure(", ".join(paths.values()), str(exc)) from exc

        removed: list[dict[str, Any]] = response.json() or []
        return [paths[item["name"]] for item in removed if item.get("name") in paths]

    async def _list_folder(self, client: httpx.AsyncClient, prefix: str) -> list[str]:
        objects: list[str] = []
        offset = 0
        while True:
            response = await client.post(
                f"/object/list/{self._bucket}",
                json={"prefix": prefix, "limit": LIST_PAGE_SIZE, "offset": offset},
            )
            response.raise_for_status()
            entries: list[dict[str, Any]] = response.json() or []

            for entry in entries:
                name = entry.get("name")
                if not name:
                    continue
                path = f"{prefix}/{name}" if prefix else name
                # Folders come back without an id
                if entry.get("id") is None:
                    objects.extend(await self._list_folder(client, path))
                else:
                    objects.append(path)

            if len(entries) < LIST_PAGE_SIZE:
                return objects
            offset += LIST_PAGE_SIZE

    async def list_objects(self, prefix: str = "") -> list[str]:
        async with self._client() as client:
            try:
                paths = await self._list_folder(client, prefix.strip("/"))
            except httpx.HTTPError as exc:
                logger.error("media_list_failed", prefix=prefix, error=str(exc))
                raise StorageError("Failed to list media") from exc
        return sorted(self.public_url(path) for path in paths)
