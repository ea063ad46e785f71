"""Health check endpoints."""

from datetime import datetime, timezone
from typing import Callable

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from api.v1.dependencies import get_uow_factory
from core.config import settings
from core.exceptions import AppException
from domain.repositories.unit_of_work import IUnitOfWork

router = APIRouter(tags=["health"])

API_VERSION = "1.0.0"


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str
    environment: str
    storage: str | None = None
    media: str | None = None


@router.get("/health", response_model=HealthResponse, summary="Basic health check")
async def health_check() -> HealthResponse:
    """
    Basic health check for load balancers.

    Returns service status without checking dependencies. Fast and lightweight.
    """
    return HealthResponse(
        status="healthy",
        version=API_VERSION,
        timestamp=datetime.now(timezone.utc).isoformat(),
        environment=settings.app_env,
    )


@router.get(
    "/health/detailed",
    response_model=HealthResponse,
    summary="Detailed health check",
)
async def detailed_health_check(
    uow_factory: Callable[[], IUnitOfWork] = Depends(get_uow_factory),
) -> HealthResponse:
    """
    Detailed health check including content storage connectivity.

    Reads the profile record through the configured storage backend.
    """
    storage_status = "unknown"

    try:
        async with uow_factory() as uow:
            await uow.profile.get()
        storage_status = "healthy"
    except AppException as e:
        storage_status = f"unhealthy: {e.message}"
    except Exception as e:
        storage_status = f"unhealthy: {str(e)}"

    overall_status = "healthy" if storage_status == "healthy" else "degraded"

    return HealthResponse(
        status=overall_status,
        version=API_VERSION,
        timestamp=datetime.now(timezone.utc).isoformat(),
        environment=settings.app_env,
        storage=f"{settings.storage_backend}: {storage_status}",
        media=settings.media_backend,
    )
