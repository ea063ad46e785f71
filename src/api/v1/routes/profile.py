"""Profile API routes."""

from fastapi import APIRouter, Depends, Request

from api.dependencies.auth import CurrentAdmin
from api.dependencies.body import JsonBody
from api.v1.dependencies import get_profile_service
from api.v1.schemas.profile import ProfileResponse
from core.rate_limit import limiter
from domain.normalizers.common import as_mapping
from domain.services.profile_service import ProfileService

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("", response_model=ProfileResponse, summary="Get the site profile")
@limiter.limit("60/minute")  # type: ignore[untyped-decorator]
async def get_profile(
    request: Request,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Always returns a full profile; unset fields carry their defaults."""
    profile = await service.get()
    return ProfileResponse.model_validate(profile)


@router.put("", response_model=ProfileResponse, summary="Update the site profile")
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def update_profile(
    request: Request,
    admin: CurrentAdmin,
    body: JsonBody,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """
    Merge the body over the stored profile.

    The bio is sanitized to the rich-text allow-list; plain text is turned
    into paragraphs. Replaced photos are cleaned up in the background.
    """
    profile = await service.update(as_mapping(body))
    return ProfileResponse.model_validate(profile)
