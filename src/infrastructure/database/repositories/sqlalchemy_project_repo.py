"""SQLAlchemy implementation of Project repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.payload import to_payload
from domain.entities.project import Project
from domain.normalizers.project import normalize_project
from infrastructure.database.models import ProjectModel


class SQLAlchemyProjectRepository:
    """SQLAlchemy implementation of IProjectRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: str) -> Project | None:
        """Get a project by ID."""
        model = await self._session.get(ProjectModel, id)
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[Project]:
        """Get all projects ordered by sort order."""
        stmt = select(ProjectModel).order_by(ProjectModel.sort_order, ProjectModel.created_at)
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def put(self, project: Project) -> Project:
        """Insert or replace a project."""
        model = await self._session.get(ProjectModel, project.id)
        if model is None:
            model = ProjectModel(id=project.id)
            self._session.add(model)

        payload = to_payload(project)
        model.title = project.title
        model.categories = list(project.categories)
        model.description = project.description
        model.thumbnail = project.thumbnail
        model.thumbnail_focus_x = project.thumbnail_focus_x
        model.thumbnail_focus_y = project.thumbnail_focus_y
        model.thumbnail_zoom = project.thumbnail_zoom
        model.gallery = list(project.gallery)
        model.attachments = payload["attachments"]
        model.links = payload["links"]
        model.sort_order = project.order

        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, id: str) -> bool:
        """Delete a project."""
        model = await self._session.get(ProjectModel, id)
        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    @staticmethod
    def _to_entity(model: ProjectModel) -> Project:
        """Convert ORM model to domain entity."""
        return normalize_project(
            {
                "id": model.id,
                "title": model.title,
                "categories": model.categories,
                "description": model.description,
                "thumbnail": model.thumbnail,
                "thumbnailFocusX": model.thumbnail_focus_x,
                "thumbnailFocusY": model.thumbnail_focus_y,
                "thumbnailZoom": model.thumbnail_zoom,
                "gallery": model.gallery,
                "attachments": model.attachments,
                "links": model.links,
                "order": model.sort_order,
            }
        )
