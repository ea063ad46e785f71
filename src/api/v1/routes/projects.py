"""Project API routes."""

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.auth import CurrentAdmin
from api.dependencies.body import JsonBody
from api.v1.dependencies import get_project_service
from api.v1.schemas.common import SuccessResponse
from api.v1.schemas.project import ProjectResponse
from core.rate_limit import limiter
from domain.normalizers.common import as_mapping
from domain.ordering import extract_ordered_ids
from domain.services.project_service import ProjectService

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get(
    "",
    response_model=list[ProjectResponse],
    summary="List projects",
)
@limiter.limit("60/minute")  # type: ignore[untyped-decorator]
async def list_projects(
    request: Request,
    service: ProjectService = Depends(get_project_service),
) -> list[ProjectResponse]:
    """Get all projects in display order."""
    projects = await service.get_all()
    return [ProjectResponse.model_validate(project) for project in projects]


@router.post(
    "",
    response_model=ProjectResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a project",
    responses={
        201: {"description": "Project created successfully"},
        401: {"description": "Not authenticated"},
    },
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def create_project(
    request: Request,
    admin: CurrentAdmin,
    body: JsonBody,
    service: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    """
    Create a project.

    The body is normalized rather than rejected: unknown fields are ignored,
    bad numbers fall back to defaults and the description is sanitized.
    ``order`` picks the insert position (default: last).
    """
    project = await service.create(as_mapping(body))
    return ProjectResponse.model_validate(project)


@router.put(
    "/reorder",
    response_model=list[ProjectResponse],
    summary="Reorder projects",
    responses={
        200: {"description": "Projects reordered"},
        400: {"description": "Ids are empty, duplicated, incomplete or unknown"},
    },
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def reorder_projects(
    request: Request,
    admin: CurrentAdmin,
    body: JsonBody,
    service: ProjectService = Depends(get_project_service),
) -> list[ProjectResponse]:
    """Accepts ``["id", ...]`` or ``[{"id": ...}, ...]`` naming every project once."""
    projects = await service.reorder(extract_ordered_ids(body))
    return [ProjectResponse.model_validate(project) for project in projects]


@router.get(
    "/{project_id}",
    response_model=ProjectResponse,
    summary="Get a project",
    responses={404: {"description": "Project not found"}},
)
@limiter.limit("60/minute")  # type: ignore[untyped-decorator]
async def get_project(
    request: Request,
    project_id: str,
    service: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    project = await service.get(project_id)
    return ProjectResponse.model_validate(project)


@router.api_route(
    "/{project_id}",
    methods=["PUT", "PATCH"],
    response_model=ProjectResponse,
    summary="Update a project",
    responses={404: {"description": "Project not found"}},
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def update_project(
    request: Request,
    project_id: str,
    admin: CurrentAdmin,
    body: JsonBody,
    service: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    """Merge the body over the stored project. Use ``/reorder`` to move it."""
    project = await service.update(project_id, as_mapping(body))
    return ProjectResponse.model_validate(project)


@router.delete(
    "/{project_id}",
    response_model=SuccessResponse,
    summary="Delete a project",
    responses={404: {"description": "Project not found"}},
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def delete_project(
    request: Request,
    project_id: str,
    admin: CurrentAdmin,
    service: ProjectService = Depends(get_project_service),
) -> SuccessResponse:
    await service.delete(project_id)
    return SuccessResponse()
