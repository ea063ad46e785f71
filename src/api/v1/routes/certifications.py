"""Certification API routes."""

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.auth import CurrentAdmin
from api.dependencies.body import JsonBody
from api.v1.dependencies import get_certification_service
from api.v1.schemas.common import SuccessResponse
from api.v1.schemas.certification import CertificationResponse
from core.rate_limit import limiter
from domain.normalizers.common import as_mapping
from domain.ordering import extract_ordered_ids
from domain.services.certification_service import CertificationService

router = APIRouter(prefix="/certifications", tags=["certifications"])


@router.get(
    "",
    response_model=list[CertificationResponse],
    summary="List certifications",
)
@limiter.limit("60/minute")  # type: ignore[untyped-decorator]
async def list_certifications(
    request: Request,
    service: CertificationService = Depends(get_certification_service),
) -> list[CertificationResponse]:
    """Get all certifications in display order."""
    certifications = await service.get_all()
    return [CertificationResponse.model_validate(item) for item in certifications]


@router.post(
    "",
    response_model=CertificationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a certification",
    responses={
        201: {"description": "Certification created successfully"},
        401: {"description": "Not authenticated"},
    },
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def create_certification(
    request: Request,
    admin: CurrentAdmin,
    body: JsonBody,
    service: CertificationService = Depends(get_certification_service),
) -> CertificationResponse:
    """Create a certification. The palette is derived from the organization when not given."""
    certification = await service.create(as_mapping(body))
    return CertificationResponse.model_validate(certification)


@router.put(
    "/reorder",
    response_model=list[CertificationResponse],
    summary="Reorder certifications",
    responses={
        200: {"description": "Certifications reordered"},
        400: {"description": "Ids are empty, duplicated, incomplete or unknown"},
    },
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def reorder_certifications(
    request: Request,
    admin: CurrentAdmin,
    body: JsonBody,
    service: CertificationService = Depends(get_certification_service),
) -> list[CertificationResponse]:
    certifications = await service.reorder(extract_ordered_ids(body))
    return [CertificationResponse.model_validate(item) for item in certifications]


@router.get(
    "/{certification_id}",
    response_model=CertificationResponse,
    summary="Get a certification",
    responses={404: {"description": "Certification not found"}},
)
@limiter.limit("60/minute")  # type: ignore[untyped-decorator]
async def get_certification(
    request: Request,
    certification_id: str,
    service: CertificationService = Depends(get_certification_service),
) -> CertificationResponse:
    certification = await service.get(certification_id)
    return CertificationResponse.model_validate(certification)


@router.api_route(
    "/{certification_id}",
    methods=["PUT", "PATCH"],
    response_model=CertificationResponse,
    summary="Update a certification",
    responses={404: {"description": "Certification not found"}},
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def update_certification(
    request: Request,
    certification_id: str,
    admin: CurrentAdmin,
    body: JsonBody,
    service: CertificationService = Depends(get_certification_service),
) -> CertificationResponse:
    certification = await service.update(certification_id, as_mapping(body))
    return CertificationResponse.model_validate(certification)


@router.delete(
    "/{certification_id}",
    response_model=SuccessResponse,
    summary="Delete a certification",
    responses={404: {"description": "Certification not found"}},
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def delete_certification(
    request: Request,
    certification_id: str,
    admin: CurrentAdmin,
    service: CertificationService = Depends(get_certification_service),
) -> SuccessResponse:
    await service.delete(certification_id)
    return SuccessResponse()
