"""SQLAlchemy Unit of Work implementation."""

from typing import Any, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.exceptions import StorageError
from infrastructure.database.repositories.sqlalchemy_category_repo import (
    SQLAlchemyCategoryRepository,
)
from infrastructure.database.repositories.sqlalchemy_certification_repo import (
    SQLAlchemyCertificationRepository,
)
from infrastructure.database.repositories.sqlalchemy_contact_repo import (
    SQLAlchemyContactSubmissionRepository,
)
from infrastructure.database.repositories.sqlalchemy_profile_repo import SQLAlchemyProfileRepository
from infrastructure.database.repositories.sqlalchemy_project_repo import SQLAlchemyProjectRepository
from infrastructure.database.repositories.sqlalchemy_service_repo import SQLAlchemyServiceRepository


class SQLAlchemyUnitOfWork:
    """Unit of Work implementation using SQLAlchemy."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None

    def _require_session(self) -> AsyncSession:
        if not self._session:
            raise RuntimeError("UnitOfWork not initialized. Use as context manager.")
        return self._session

    @property
    def profile(self) -> SQLAlchemyProfileRepository:
        """Get profile repository."""
        return SQLAlchemyProfileRepository(self._require_session())

    @property
    def projects(self) -> SQLAlchemyProjectRepository:
        """Get project repository."""
        return SQLAlchemyProjectRepository(self._require_session())

    @property
    def categories(self) -> SQLAlchemyCategoryRepository:
        """Get project category repository."""
        return SQLAlchemyCategoryRepository(self._require_session())

    @property
    def certifications(self) -> SQLAlchemyCertificationRepository:
        """Get certification repository."""
        return SQLAlchemyCertificationRepository(self._require_session())

    @property
    def services(self) -> SQLAlchemyServiceRepository:
        """Get service repository."""
        return SQLAlchemyServiceRepository(self._require_session())

    @property
    def contact_submissions(self) -> SQLAlchemyContactSubmissionRepository:
        """Get contact submission repository."""
        return SQLAlchemyContactSubmissionRepository(self._require_session())

    async def commit(self) -> None:
        """Commit the current transaction."""
        if self._session:
            try:
                await self._session.commit()
            except SQLAlchemyError as exc:
                await self._session.rollback()
                raise StorageError("Failed to save changes") from exc

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        if self._session:
            await self._session.rollback()

    async def __aenter__(self) -> "SQLAlchemyUnitOfWork":
        """Enter the context manager and create session."""
        self._session = self._session_factory()
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[Exception],
        exc_tb: Any,
    ) -> None:
        """Exit the context manager and cleanup.

        Database errors raised by repository calls inside the block surface
        as ``StorageError`` so callers see one failure type per backend.
        """
        if self._session:
            try:
                if exc_type:
                    await self.rollback()
                await self._session.close()
            except SQLAlchemyError as exc:
                raise StorageError("Database operation failed") from exc
            finally:
                self._session = None
        if isinstance(exc_val, SQLAlchemyError):
            raise StorageError("Database operation failed") from exc_val
