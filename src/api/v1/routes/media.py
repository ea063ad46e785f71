"""Media maintenance API routes."""

from fastapi import APIRouter, Depends, Request

from api.dependencies.auth import CurrentAdmin
from api.v1.dependencies import get_media_service
from api.v1.schemas.media import MediaCleanupResponse
from core.rate_limit import limiter
from domain.services.media_service import MediaService

router = APIRouter(prefix="/media", tags=["media"])


@router.post(
    "/cleanup",
    response_model=MediaCleanupResponse,
    summary="Delete unreferenced media",
)
@limiter.limit("5/minute")  # type: ignore[untyped-decorator]
async def cleanup_media(
    request: Request,
    admin: CurrentAdmin,
    service: MediaService = Depends(get_media_service),
) -> MediaCleanupResponse:
    """Sweep the whole media root and delete objects no content points at."""
    deleted = await service.cleanup_unused()
    return MediaCleanupResponse(deleted=deleted, deleted_count=len(deleted))
