"""Upload validation and media maintenance."""

import asyncio
import time
from dataclasses import dataclass
from typing import Sequence
from uuid import uuid4

import structlog

from core.exceptions import AppException, UploadRejectedError
from domain.entities.attachment import DOCX_MIME_TYPE, PDF_MIME_TYPE
from domain.media import MediaSweeper
from domain.normalizers.common import slugify
from domain.repositories.media_storage import IMediaStorage

logger = structlog.get_logger()

DEFAULT_UPLOAD_FOLDER = "projects"
ATTACHMENTS_FOLDER = "attachments"

IMAGE_EXTENSIONS = {
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/webp": "webp",
    "image/gif": "gif",
}
DOCUMENT_EXTENSIONS = {
    PDF_MIME_TYPE: "pdf",
    DOCX_MIME_TYPE: "docx",
}


@dataclass
class UploadFile:
    """An uploaded file, detached from the web framework."""

    filename: str
    content_type: str
    data: bytes


@dataclass
class UploadFailure:
    filename: str
    error: str


@dataclass
class BatchUploadResult:
    uploaded: list[str]
    failed: list[UploadFailure]


def resolve_folder(category: str | None) -> str:
    return slugify(category or "") or DEFAULT_UPLOAD_FOLDER


def allowed_extensions(folder: str) -> dict[str, str]:
    if folder == ATTACHMENTS_FOLDER:
        return {**IMAGE_EXTENSIONS, **DOCUMENT_EXTENSIONS}
    return IMAGE_EXTENSIONS


def build_object_path(folder: str, extension: str) -> str:
    """``<folder>/<8 hex>-<epoch ms>.<ext>``"""
    return f"{folder}/{uuid4().hex[:8]}-{int(time.time() * 1000)}.{extension}"


class MediaService:
    """Validates uploads before handing them to media storage."""

    def __init__(
        self,
        storage: IMediaStorage,
        sweeper: MediaSweeper,
        max_bytes: int,
    ) -> None:
        self._storage = storage
        self._sweeper = sweeper
        self._max_bytes = max_bytes

    def _validate(self, upload: UploadFile, folder: str) -> str:
        extension = allowed_extensions(folder).get(upload.content_type)
        if extension is None:
            raise UploadRejectedError("Invalid file type", filename=upload.filename)
        if not upload.data:
            raise UploadRejectedError("Empty file", filename=upload.filename)
        if len(upload.data) > self._max_bytes:
            limit_mb = self._max_bytes // (1024 * 1024)
            raise UploadRejectedError(
                f"File too large (max {limit_mb}MB)", filename=upload.filename
            )
        return extension

    async def upload(self, upload: UploadFile, category: str | None = None) -> str:
        """Store one file and return its media reference."""
        folder = resolve_folder(category)
        extension = self._validate(upload, folder)
        reference = await self._storage.upload(
            build_object_path(folder, extension), upload.data, upload.content_type
        )
        logger.info("media_uploaded", reference=reference, size=len(upload.data))
        return reference

    async def upload_many(
        self, uploads: Sequence[UploadFile], category: str | None = None
    ) -> BatchUploadResult:
        """Upload concurrently; one file failing does not fail the others."""
        results = await asyncio.gather(
            *(self.upload(upload, category) for upload in uploads),
            return_exceptions=True,
        )

        uploaded: list[str] = []
        failed: list[UploadFailure] = []
        for upload, result in zip(uploads, results):
            if isinstance(result, AppException):
                failed.append(UploadFailure(filename=upload.filename, error=result.message))
            elif isinstance(result, BaseException):
                raise result
            else:
                uploaded.append(result)
        return BatchUploadResult(uploaded=uploaded, failed=failed)

    async def cleanup_unused(self) -> list[str]:
        """Remove every stored object that no content references."""
        return await self._sweeper.cleanup_all_unused()
