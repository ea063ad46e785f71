"""Pydantic schemas for uploads and media maintenance."""

from api.v1.schemas.common import CamelModel


class UploadResponse(CamelModel):
    path: str


class UploadFailureResponse(CamelModel):
    filename: str
    error: str


class BatchUploadResponse(CamelModel):
    uploaded: list[str]
    failed: list[UploadFailureResponse]


class MediaCleanupResponse(CamelModel):
    deleted: list[str]
    deleted_count: int
