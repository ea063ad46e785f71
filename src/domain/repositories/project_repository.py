"""Project repository protocol."""

from typing import Protocol

from domain.entities.project import Project


class IProjectRepository(Protocol):
    """Repository interface for Project entities."""

    async def get(self, id: str) -> Project | None:
        """Get a project by ID."""
        ...

    async def get_all(self) -> list[Project]:
        """Get all projects, ascending by order."""
        ...

    async def put(self, project: Project) -> Project:
        """Insert or replace a project."""
        ...

    async def delete(self, id: str) -> bool:
        """Delete a project and return success status."""
        ...
