"""Project category repository protocol."""

from typing import Protocol

from domain.entities.project import ProjectCategory


class ICategoryRepository(Protocol):
    """Repository for the managed project category list."""

    async def get_all(self) -> list[ProjectCategory]:
        """Get all stored categories, ascending by order."""
        ...

    async def replace_all(self, categories: list[ProjectCategory]) -> list[ProjectCategory]:
        """Replace the stored list with ``categories``."""
        ...
