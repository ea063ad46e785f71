"""Project category API routes."""

from fastapi import APIRouter, Depends, Request

from api.dependencies.auth import CurrentAdmin
from api.dependencies.body import JsonBody
from api.v1.dependencies import get_category_service
from api.v1.schemas.project import ProjectCategoryResponse
from core.rate_limit import limiter
from domain.services.category_service import CategoryService

router = APIRouter(prefix="/project-categories", tags=["project-categories"])


@router.get(
    "",
    response_model=list[ProjectCategoryResponse],
    summary="List project categories",
)
@limiter.limit("60/minute")  # type: ignore[untyped-decorator]
async def list_categories(
    request: Request,
    service: CategoryService = Depends(get_category_service),
) -> list[ProjectCategoryResponse]:
    """Managed categories; derived from project labels when none are stored."""
    categories = await service.get_all()
    return [ProjectCategoryResponse.model_validate(category) for category in categories]


@router.put(
    "",
    response_model=list[ProjectCategoryResponse],
    summary="Replace project categories",
    responses={400: {"description": "Body is not a list"}},
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def update_categories(
    request: Request,
    admin: CurrentAdmin,
    body: JsonBody,
    service: CategoryService = Depends(get_category_service),
) -> list[ProjectCategoryResponse]:
    """
    Replace the category list.

    Renamed categories are renamed on every project that uses them and
    removed categories are dropped from projects, in the same write.
    """
    categories = await service.update(body)
    return [ProjectCategoryResponse.model_validate(category) for category in categories]
