"""Media storage on the local filesystem, served by the site under ``/images``."""

import asyncio
from pathlib import Path, PurePosixPath
from typing import Sequence

import structlog

from core.exceptions import MediaCleanupFailure, StorageError

logger = structlog.get_logger()

PUBLIC_PREFIX = "/images/"


class LocalMediaStorage:
    """Stores media under ``<public_dir>/images``; references are ``/images/<path>``."""

    def __init__(self, public_dir: Path) -> None:
        self._public_dir = Path(public_dir).resolve()
        self._root = self._public_dir / "images"

    def key(self, reference: str) -> str | None:
        """Path below ``images/`` that ``reference`` names, or None if not ours."""
        if not isinstance(reference, str):
            return None
        value = reference.strip().split("?", 1)[0]
        if not value.startswith(PUBLIC_PREFIX):
            return None
        return value[len(PUBLIC_PREFIX):] or None

    def owns(self, reference: str) -> bool:
        return self.key(reference) is not None

    def _resolve(self, reference: str) -> Path | None:
        """Filesystem path of ``reference``, or None if it would escape the media root."""
        relative = self.key(reference)
        if relative is None:
            return None
        candidate = (self._root / PurePosixPath(relative)).resolve()
        if candidate == self._root or self._root not in candidate.parents:
            return None
        return candidate

    def _write(self, path: str, data: bytes) -> str:
        target = (self._root / PurePosixPath(path)).resolve()
        if self._root not in target.parents:
            raise StorageError("Invalid media path")
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)
        except OSError as exc:
            raise StorageError("Upload failed") from exc
        return f"{PUBLIC_PREFIX}{path}"

    async def upload(self, path: str, data: bytes, content_type: str) -> str:
        return await asyncio.to_thread(self._write, path, data)

    def _unlink(self, reference: str) -> bool:
        target = self._resolve(reference)
        if target is None or not target.is_file():
            return False
        try:
            target.unlink()
        except OSError as exc:
            raise MediaCleanupFailure(reference, str(exc)) from exc
        return True

    async def delete(self, references: Sequence[str]) -> list[str]:
        removed: list[str] = []
        for reference in references:
            if not self.owns(reference):
                continue
            if await asyncio.to_thread(self._unlink, reference):
                removed.append(reference.strip())
        return removed

    def _walk(self, prefix: str) -> list[str]:
        base = self._root / PurePosixPath(prefix) if prefix else self._root
        if not base.is_dir():
            return []
        return sorted(
            f"{PUBLIC_PREFIX}{path.relative_to(self._root).as_posix()}"
            for path in base.rglob("*")
            if path.is_file()
        )

    async def list_objects(self, prefix: str = "") -> list[str]:
        return await asyncio.to_thread(self._walk, prefix)
