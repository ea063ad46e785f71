"""Project category list business logic."""

from typing import Any, Callable

import structlog

from core.exceptions import ValidationError
from domain.categories import reconcile_categories
from domain.entities.project import ProjectCategory
from domain.normalizers.category import normalize_category_list
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class CategoryService:
    """Service layer for the managed project category list."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_all(self) -> list[ProjectCategory]:
        """Stored categories, or the labels projects use when none are stored."""
        async with self._uow_factory() as uow:
            stored = await uow.categories.get_all()
            projects = await uow.projects.get_all()
        return normalize_category_list(stored, projects)

    async def update(self, payload: Any) -> list[ProjectCategory]:
        """Replace the list and rewrite every project's labels to match it.

        Categories and affected projects are written in one unit of work.
        """
        if not isinstance(payload, list):
            raise ValidationError("Categories payload must be a list")

        async with self._uow_factory() as uow:
            previous = await uow.categories.get_all()
            projects = await uow.projects.get_all()
            result = reconcile_categories(payload, projects, previous)

            for project in result.updated_projects:
                await uow.projects.put(project)
            saved = await uow.categories.replace_all(result.categories)
            await uow.commit()

        logger.info(
            "categories_reconciled",
            category_count=len(saved),
            updated_project_count=len(result.updated_projects),
        )
        return saved
