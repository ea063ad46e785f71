"""Project service layer with business logic."""

from typing import Any, Callable, Mapping, Sequence

import structlog

from core.exceptions import ProjectNotFoundError
from domain.categories import restrict_to_categories
from domain.entities.payload import to_payload
from domain.entities.project import Project
from domain.ids import PROJECT_ID_PREFIX, new_record_id
from domain.media import ICleanupScheduler, dropped_media, project_media
from domain.normalizers.common import as_mapping, parse_int
from domain.normalizers.project import normalize_project
from domain.ordering import apply_reorder, persist_order_changes, reindex, sort_by_order
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class ProjectService:
    """Service layer for Project business logic."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        cleanup: ICleanupScheduler,
    ) -> None:
        self._uow_factory = uow_factory
        self._cleanup = cleanup

    async def get_all(self) -> list[Project]:
        """Get all projects in display order."""
        async with self._uow_factory() as uow:
            projects = await uow.projects.get_all()
        return sort_by_order(normalize_project(to_payload(project)) for project in projects)

    async def get(self, project_id: str) -> Project:
        async with self._uow_factory() as uow:
            project = await uow.projects.get(project_id)
        if not project:
            raise ProjectNotFoundError(project_id)
        return normalize_project(to_payload(project))

    async def create(self, payload: Mapping[str, Any]) -> Project:
        """Create a project, inserting it at ``order`` (default: last) and re-densifying."""
        data = as_mapping(payload)
        async with self._uow_factory() as uow:
            existing = sort_by_order(await uow.projects.get_all())
            managed = await uow.categories.get_all()

            project = normalize_project({**data, "id": new_record_id(PROJECT_ID_PREFIX)})
            project.categories = restrict_to_categories(project.categories, managed)

            requested = parse_int(data.get("order"))
            position = len(existing) if requested is None else requested - 1
            position = min(max(position, 0), len(existing))

            sequence = [*existing[:position], project, *existing[position:]]
            created = await persist_order_changes(uow.projects, existing, reindex(sequence))
            await uow.commit()

        logger.info("project_created", project_id=project.id)
        return created[project.id]

    async def update(self, project_id: str, payload: Mapping[str, Any]) -> Project:
        """Merge ``payload`` over the stored project. Order is left to reorder."""
        async with self._uow_factory() as uow:
            before = await uow.projects.get(project_id)
            if not before:
                raise ProjectNotFoundError(project_id)
            managed = await uow.categories.get_all()

            merged = {**to_payload(before), **as_mapping(payload)}
            project = normalize_project({**merged, "id": project_id, "order": before.order})
            project.categories = restrict_to_categories(project.categories, managed)

            saved = await uow.projects.put(project)
            await uow.commit()

        self._cleanup.schedule(dropped_media(project_media(before), project_media(saved)))
        return saved

    async def delete(self, project_id: str) -> bool:
        """Delete a project, close the gap in ordering and sweep its media."""
        async with self._uow_factory() as uow:
            target = await uow.projects.get(project_id)
            if not target:
                raise ProjectNotFoundError(project_id)

            deleted = await uow.projects.delete(project_id)
            remaining = sort_by_order(
                project for project in await uow.projects.get_all() if project.id != project_id
            )
            await persist_order_changes(uow.projects, remaining, reindex(remaining))
            await uow.commit()

        self._cleanup.schedule(project_media(target))
        return deleted

    async def reorder(self, ordered_ids: Sequence[str]) -> list[Project]:
        """Apply a full permutation of project ids."""
        async with self._uow_factory() as uow:
            existing = await uow.projects.get_all()
            reordered = apply_reorder(existing, ordered_ids)
            await persist_order_changes(uow.projects, existing, reordered)
            await uow.commit()
        return reordered

