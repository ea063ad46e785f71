"""Dependency injection factories for API v1."""

from functools import lru_cache
from typing import Callable

from core.config import settings
from domain.media import ICleanupScheduler, MediaSweeper
from domain.repositories.mailer import IMailer
from domain.repositories.media_storage import IMediaStorage
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.category_service import CategoryService
from domain.services.certification_service import CertificationService
from domain.services.contact_service import ContactService
from domain.services.media_service import MediaService
from domain.services.profile_service import ProfileService
from domain.services.project_service import ProjectService
from domain.services.service_catalog_service import ServiceCatalogService
from infrastructure.auth.admin_credentials import AdminCredentials
from infrastructure.database.session import async_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork
from infrastructure.json_store.store import JsonFileStore
from infrastructure.json_store.unit_of_work import JsonFileUnitOfWork
from infrastructure.mail.smtp_mailer import SMTPMailer
from infrastructure.media.cleanup_scheduler import BackgroundCleanupScheduler
from infrastructure.media.local_storage import LocalMediaStorage
from infrastructure.media.supabase_storage import SupabaseMediaStorage


def get_uow_factory() -> Callable[[], IUnitOfWork]:
    """Factory for creating Unit of Work instances for the configured backend."""
    if settings.storage_backend == "json":
        store = JsonFileStore(settings.data_dir)

        def json_factory() -> IUnitOfWork:
            return JsonFileUnitOfWork(store)

        return json_factory

    def factory() -> IUnitOfWork:
        return SQLAlchemyUnitOfWork(async_session_factory)

    return factory


@lru_cache
def get_media_storage() -> IMediaStorage:
    """Get media storage for the configured backend."""
    if settings.media_backend == "supabase":
        return SupabaseMediaStorage(
            supabase_url=settings.supabase_url,
            service_role_key=settings.supabase_service_role_key,
            bucket=settings.media_bucket,
        )
    return LocalMediaStorage(settings.public_dir)


@lru_cache
def get_media_sweeper() -> MediaSweeper:
    """Get Media sweeper instance."""
    return MediaSweeper(get_uow_factory(), get_media_storage())


@lru_cache
def get_cleanup_scheduler() -> BackgroundCleanupScheduler:
    """Get the process-wide background cleanup scheduler."""
    return BackgroundCleanupScheduler(get_media_sweeper())


def _cleanup() -> ICleanupScheduler:
    return get_cleanup_scheduler()


@lru_cache
def get_mailer() -> IMailer:
    """Get SMTP mailer instance."""
    return SMTPMailer(
        host=settings.smtp_host,
        port=settings.smtp_port,
        username=settings.smtp_user,
        password=settings.smtp_password,
        use_tls=settings.smtp_use_tls,
    )


@lru_cache
def get_admin_credentials() -> AdminCredentials:
    """Get the configured admin account."""
    return AdminCredentials(settings.admin_email, settings.admin_password_hash)


@lru_cache
def get_profile_service() -> ProfileService:
    """Get Profile service instance."""
    return ProfileService(get_uow_factory(), _cleanup())


@lru_cache
def get_project_service() -> ProjectService:
    """Get Project service instance."""
    return ProjectService(get_uow_factory(), _cleanup())


@lru_cache
def get_category_service() -> CategoryService:
    """Get Category service instance."""
    return CategoryService(get_uow_factory())


@lru_cache
def get_certification_service() -> CertificationService:
    """Get Certification service instance."""
    return CertificationService(get_uow_factory(), _cleanup())


@lru_cache
def get_service_catalog_service() -> ServiceCatalogService:
    """Get Service catalog service instance."""
    return ServiceCatalogService(get_uow_factory(), _cleanup())


@lru_cache
def get_contact_service() -> ContactService:
    """Get Contact service instance."""
    return ContactService(
        get_uow_factory(),
        mailer=get_mailer(),
        recipient=settings.contact_to_email or settings.smtp_user,
    )


@lru_cache
def get_media_service() -> MediaService:
    """Get Media service instance."""
    return MediaService(
        get_media_storage(),
        get_media_sweeper(),
        max_bytes=settings.upload_max_bytes,
    )
