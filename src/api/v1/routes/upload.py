"""Media upload API routes."""

from fastapi import APIRouter, Depends, Request
from starlette.datastructures import UploadFile as StarletteUploadFile

from api.dependencies.auth import CurrentAdmin
from api.v1.dependencies import get_media_service
from api.v1.schemas.media import BatchUploadResponse, UploadFailureResponse, UploadResponse
from core.exceptions import ValidationError
from core.rate_limit import limiter
from domain.services.media_service import MediaService, UploadFile

router = APIRouter(prefix="/upload", tags=["upload"])


async def _to_upload(file: StarletteUploadFile) -> UploadFile:
    return UploadFile(
        filename=file.filename or "",
        content_type=file.content_type or "",
        data=await file.read(),
    )


def _category(value: object) -> str | None:
    return value if isinstance(value, str) else None


@router.post(
    "",
    response_model=UploadResponse,
    summary="Upload a file",
    responses={400: {"description": "No file, wrong type or too large"}},
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def upload_file(
    request: Request,
    admin: CurrentAdmin,
    service: MediaService = Depends(get_media_service),
) -> UploadResponse:
    """
    Multipart form with ``file`` and optional ``category`` (folder, default
    ``projects``). Images go anywhere; PDF and DOCX only to ``attachments``.
    """
    async with request.form() as form:
        file = form.get("file")
        if not isinstance(file, StarletteUploadFile):
            raise ValidationError("No file provided")
        reference = await service.upload(await _to_upload(file), _category(form.get("category")))
    return UploadResponse(path=reference)


@router.post(
    "/batch",
    response_model=BatchUploadResponse,
    summary="Upload several files",
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def upload_files(
    request: Request,
    admin: CurrentAdmin,
    service: MediaService = Depends(get_media_service),
) -> BatchUploadResponse:
    """Every ``files`` part is uploaded concurrently; failures are reported per file."""
    async with request.form() as form:
        files = [item for item in form.getlist("files") if isinstance(item, StarletteUploadFile)]
        if not files:
            raise ValidationError("No files provided")
        uploads = [await _to_upload(file) for file in files]
        result = await service.upload_many(uploads, _category(form.get("category")))

    return BatchUploadResponse(
        uploaded=result.uploaded,
        failed=[
            UploadFailureResponse(filename=failure.filename, error=failure.error)
            for failure in result.failed
        ],
    )
