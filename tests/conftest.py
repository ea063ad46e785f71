"""Pytest configuration and fixtures."""

import os
from collections.abc import AsyncGenerator
from pathlib import Path
from typing import Callable

# Test settings must be in place before the app modules read them
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["STORAGE_BACKEND"] = "database"
os.environ["MEDIA_BACKEND"] = "local"
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["APP_ENV"] = "test"

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from domain.media import MediaSweeper
from domain.repositories.unit_of_work import IUnitOfWork
from infrastructure.auth.admin_credentials import AdminCredentials, hash_password
from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.auth.provider import TokenUser
from infrastructure.database.models import Base
from infrastructure.database.session import build_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork
from infrastructure.media.cleanup_scheduler import BackgroundCleanupScheduler
from infrastructure.media.local_storage import LocalMediaStorage

# Test database URL (SQLite in memory, one connection shared per test)
TEST_DATABASE_URL = "sqlite+aiosqlite://"

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "correct horse battery staple"
CONTACT_RECIPIENT = "owner@example.com"


class RecordingMailer:
    """Mailer double that keeps every message instead of sending it."""

    def __init__(self) -> None:
        self.sent: list[dict[str, str]] = []

    async def send(self, to: str, subject: str, text: str, html: str) -> None:
        self.sent.append({"to": to, "subject": subject, "text": text, "html": html})


@pytest.fixture(scope="session")
def admin_password_hash() -> str:
    return hash_password(ADMIN_PASSWORD)


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database with every table."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create session factory."""
    return build_session_factory(engine)


@pytest.fixture
def uow_factory(
    session_factory: async_sessionmaker[AsyncSession],
) -> Callable[[], IUnitOfWork]:
    def factory() -> IUnitOfWork:
        return SQLAlchemyUnitOfWork(session_factory)

    return factory


@pytest.fixture
def media_storage(tmp_path: Path) -> LocalMediaStorage:
    return LocalMediaStorage(tmp_path / "public")


@pytest.fixture
def cleanup_scheduler(
    uow_factory: Callable[[], IUnitOfWork], media_storage: LocalMediaStorage
) -> BackgroundCleanupScheduler:
    return BackgroundCleanupScheduler(MediaSweeper(uow_factory, media_storage))


@pytest.fixture
def mailer() -> RecordingMailer:
    return RecordingMailer()


@pytest.fixture
def admin_user() -> TokenUser:
    return TokenUser(subject=ADMIN_EMAIL, email=ADMIN_EMAIL)


@pytest.fixture
def auth_provider() -> JWTAuthProvider:
    """Create auth provider for testing."""
    return JWTAuthProvider(
        secret_key="test-secret-key",
        algorithm="HS256",
        expire_minutes=30,
    )


@pytest.fixture
def auth_token(auth_provider: JWTAuthProvider, admin_user: TokenUser) -> str:
    """Create an admin session token."""
    return str(auth_provider.create_token(admin_user))


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def app(
    uow_factory: Callable[[], IUnitOfWork],
    media_storage: LocalMediaStorage,
    cleanup_scheduler: BackgroundCleanupScheduler,
    mailer: RecordingMailer,
    auth_provider: JWTAuthProvider,
    admin_password_hash: str,
) -> FastAPI:
    """
    Create the application wired to test collaborators.

    - Content lives in an in-memory SQLite database
    - Media goes to a temporary directory
    - Outbound mail is recorded, not sent
    """
    from api.dependencies.auth import get_auth_provider
    from api.v1.dependencies import (
        get_admin_credentials,
        get_category_service,
        get_certification_service,
        get_contact_service,
        get_media_service,
        get_profile_service,
        get_project_service,
        get_service_catalog_service,
        get_uow_factory,
    )
    from domain.services.category_service import CategoryService
    from domain.services.certification_service import CertificationService
    from domain.services.contact_service import ContactService
    from domain.services.media_service import MediaService
    from domain.services.profile_service import ProfileService
    from domain.services.project_service import ProjectService
    from domain.services.service_catalog_service import ServiceCatalogService
    from main import create_app

    app = create_app()
    sweeper = MediaSweeper(uow_factory, media_storage)

    app.dependency_overrides[get_uow_factory] = lambda: uow_factory
    app.dependency_overrides[get_auth_provider] = lambda: auth_provider
    app.dependency_overrides[get_admin_credentials] = lambda: AdminCredentials(
        ADMIN_EMAIL, admin_password_hash
    )
    app.dependency_overrides[get_profile_service] = lambda: ProfileService(
        uow_factory, cleanup_scheduler
    )
    app.dependency_overrides[get_project_service] = lambda: ProjectService(
        uow_factory, cleanup_scheduler
    )
    app.dependency_overrides[get_category_service] = lambda: CategoryService(uow_factory)
    app.dependency_overrides[get_certification_service] = lambda: CertificationService(
        uow_factory, cleanup_scheduler
    )
    app.dependency_overrides[get_service_catalog_service] = lambda: ServiceCatalogService(
        uow_factory, cleanup_scheduler
    )
    app.dependency_overrides[get_contact_service] = lambda: ContactService(
        uow_factory, mailer, recipient=CONTACT_RECIPIENT
    )
    app.dependency_overrides[get_media_service] = lambda: MediaService(
        media_storage, sweeper, max_bytes=1024 * 1024
    )
    return app


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client (no auth)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def authenticated_client(
    app: FastAPI, auth_headers: dict[str, str]
) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client sending the admin bearer token."""
    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport, base_url="http://test", headers=auth_headers
    ) as c:
        yield c
    app.dependency_overrides.clear()
