"""Flat JSON file storage: one file per collection under ``data_dir``."""

import asyncio
import os
from pathlib import Path
from typing import Any

import orjson
import structlog

from core.exceptions import StorageError

logger = structlog.get_logger()


class JsonFileStore:
    """Reads and atomically rewrites collection files with orjson."""

    def __init__(self, data_dir: Path) -> None:
        self._data_dir = Path(data_dir)

    def path_for(self, name: str) -> Path:
        return self._data_dir / name

    def _read(self, name: str, default: Any) -> Any:
        path = self.path_for(name)
        if not path.exists():
            return default
        try:
            return orjson.loads(path.read_bytes())
        except (OSError, orjson.JSONDecodeError) as exc:
            logger.error("json_store_read_failed", file=str(path), error=str(exc))
            raise StorageError(f"Failed to read {name}") from exc

    def _write(self, name: str, data: Any) -> None:
        path = self.path_for(name)
        tmp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_bytes(orjson.dumps(data, option=orjson.OPT_INDENT_2))
            os.replace(tmp_path, path)
        except (OSError, TypeError) as exc:
            logger.error("json_store_write_failed", file=str(path), error=str(exc))
            raise StorageError(f"Failed to write {name}") from exc

    async def read(self, name: str, default: Any) -> Any:
        return await asyncio.to_thread(self._read, name, default)

    async def write(self, name: str, data: Any) -> None:
        await asyncio.to_thread(self._write, name, data)
