"""Service catalog API routes."""

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.auth import CurrentAdmin
from api.dependencies.body import JsonBody
from api.v1.dependencies import get_service_catalog_service
from api.v1.schemas.common import SuccessResponse
from api.v1.schemas.service import ServiceResponse
from core.rate_limit import limiter
from domain.normalizers.common import as_mapping
from domain.ordering import extract_ordered_ids
from domain.services.service_catalog_service import ServiceCatalogService

router = APIRouter(prefix="/services", tags=["services"])


@router.get("", response_model=list[ServiceResponse], summary="List services")
@limiter.limit("60/minute")  # type: ignore[untyped-decorator]
async def list_services(
    request: Request,
    service: ServiceCatalogService = Depends(get_service_catalog_service),
) -> list[ServiceResponse]:
    services = await service.get_all()
    return [ServiceResponse.model_validate(item) for item in services]


@router.post(
    "",
    response_model=ServiceResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a service",
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def create_service(
    request: Request,
    admin: CurrentAdmin,
    body: JsonBody,
    service: ServiceCatalogService = Depends(get_service_catalog_service),
) -> ServiceResponse:
    created = await service.create(as_mapping(body))
    return ServiceResponse.model_validate(created)


@router.put(
    "",
    response_model=list[ServiceResponse],
    summary="Replace the service list",
    responses={400: {"description": "Body is not a list"}},
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def replace_services(
    request: Request,
    admin: CurrentAdmin,
    body: JsonBody,
    service: ServiceCatalogService = Depends(get_service_catalog_service),
) -> list[ServiceResponse]:
    """Store exactly the given list, in the given sequence."""
    services = await service.replace_all(body)
    return [ServiceResponse.model_validate(item) for item in services]


@router.put(
    "/reorder",
    response_model=list[ServiceResponse],
    summary="Reorder services",
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def reorder_services(
    request: Request,
    admin: CurrentAdmin,
    body: JsonBody,
    service: ServiceCatalogService = Depends(get_service_catalog_service),
) -> list[ServiceResponse]:
    services = await service.reorder(extract_ordered_ids(body))
    return [ServiceResponse.model_validate(item) for item in services]


@router.patch(
    "/{service_id}",
    response_model=ServiceResponse,
    summary="Update a service",
    responses={404: {"description": "Service not found"}},
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def update_service(
    request: Request,
    service_id: str,
    admin: CurrentAdmin,
    body: JsonBody,
    service: ServiceCatalogService = Depends(get_service_catalog_service),
) -> ServiceResponse:
    updated = await service.update(service_id, as_mapping(body))
    return ServiceResponse.model_validate(updated)


@router.delete(
    "/{service_id}",
    response_model=SuccessResponse,
    summary="Delete a service",
    responses={404: {"description": "Service not found"}},
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def delete_service(
    request: Request,
    service_id: str,
    admin: CurrentAdmin,
    service: ServiceCatalogService = Depends(get_service_catalog_service),
) -> SuccessResponse:
    await service.delete(service_id)
    return SuccessResponse()
