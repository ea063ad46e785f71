"""Unit of Work protocol."""

from typing import Protocol

from domain.repositories.category_repository import ICategoryRepository
from domain.repositories.certification_repository import ICertificationRepository
from domain.repositories.contact_repository import IContactSubmissionRepository
from domain.repositories.profile_repository import IProfileRepository
from domain.repositories.project_repository import IProjectRepository
from domain.repositories.service_repository import IServiceRepository


class IUnitOfWork(Protocol):
    """Unit of Work interface for managing transactions."""

    profile: IProfileRepository
    projects: IProjectRepository
    categories: ICategoryRepository
    certifications: ICertificationRepository
    services: IServiceRepository
    contact_submissions: IContactSubmissionRepository

    async def commit(self) -> None:
        """Commit the current transaction."""
        ...

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        ...

    async def __aenter__(self) -> "IUnitOfWork":
        """Enter the context manager."""
        ...

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # type: ignore
        """Exit the context manager."""
        ...
