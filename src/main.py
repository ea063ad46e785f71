"""Main FastAPI application entry point."""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse
from fastapi.staticfiles import StaticFiles
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from api.exception_handlers import setup_exception_handlers
from api.middleware.logging import RequestLoggingMiddleware
from api.middleware.request_id import RequestIDMiddleware
from api.middleware.security import SecurityHeadersMiddleware
from api.routes.health import router as health_router
from api.v1 import router as v1_router
from api.v1.dependencies import get_cleanup_scheduler, get_media_sweeper
from core.config import settings
from core.logging import setup_logging
from core.rate_limit import limiter, rate_limit_exceeded_handler
from infrastructure.database.session import create_schema

logger = structlog.get_logger()

# Initialize structured logging
setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager for startup/shutdown tasks."""

    async def media_sweep_loop(interval_hours: int) -> None:
        """Periodically delete media that no content references."""
        while True:
            await asyncio.sleep(interval_hours * 3600)
            try:
                deleted = await get_media_sweeper().cleanup_all_unused()
                if deleted:
                    logger.info("media_sweep_completed", deleted_count=len(deleted))
            except Exception:
                logger.exception("media_sweep_failed")

    if settings.storage_backend == "database" and settings.database_auto_create:
        await create_schema()
        logger.info("database_schema_ensured")

    sweep_task: asyncio.Task[None] | None = None
    if settings.media_cleanup_interval_hours > 0:
        sweep_task = asyncio.create_task(
            media_sweep_loop(settings.media_cleanup_interval_hours)
        )

    yield

    if sweep_task is not None:
        sweep_task.cancel()
    # Let cleanups scheduled by the last writes finish
    await get_cleanup_scheduler().drain()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        lifespan=lifespan,
        default_response_class=ORJSONResponse,
        title=settings.app_name,
        description=(
            "## Portfolio Content API\n\n"
            "Content backend of a personal portfolio site: profile, projects, "
            "project categories, certifications and services, plus the public "
            "contact form.\n\n"
            "### Behaviour\n"
            "- **Normalized writes**: loosely typed bodies are normalized, never rejected "
            "for bad field values; HTML is sanitized\n"
            "- **Ordering**: list order is always dense 1..N; `/reorder` takes every id once\n"
            "- **Media cleanup**: images dropped by an edit are deleted once nothing "
            "references them\n\n"
            "### Authentication\n"
            "Reads and the contact form are public. Writes need the admin session, "
            "from `POST /api/v1/auth/login` (cookie) or as a header:\n"
            "```\nAuthorization: Bearer <your_token>\n```\n\n"
            "### Rate Limits\n"
            "- GET endpoints: 60 requests/minute\n"
            "- Writes: 30 requests/minute\n"
            "- Contact and login: 5 requests/minute"
        ),
        version="1.0.0",
        debug=settings.debug,
        openapi_tags=[
            {"name": "health", "description": "Health check endpoints"},
            {"name": "profile", "description": "Site owner profile"},
            {"name": "projects", "description": "Portfolio projects"},
            {"name": "project-categories", "description": "Managed project categories"},
            {"name": "certifications", "description": "Certifications and credentials"},
            {"name": "services", "description": "Offered services"},
            {"name": "contact", "description": "Public contact form"},
            {"name": "upload", "description": "Media uploads"},
            {"name": "media", "description": "Media maintenance"},
            {"name": "auth", "description": "Admin session"},
        ],
    )

    # Rate limiting
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # Security & tracking middleware (LIFO order - last added = outermost)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # GZip compression for responses > 1KB
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Setup exception handlers
    setup_exception_handlers(app)

    # Include routers
    app.include_router(health_router)
    app.include_router(v1_router, prefix="/api/v1")

    # Serve locally stored media at the same paths content references use
    if settings.media_backend == "local":
        app.mount(
            "/images",
            StaticFiles(directory=settings.public_dir / "images", check_dir=False),
            name="images",
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=not settings.is_production,
    )
