"""Certification repository protocol."""

from typing import Protocol

from domain.entities.certification import Certification


class ICertificationRepository(Protocol):
    """Repository interface for Certification entities."""

    async def get(self, id: str) -> Certification | None:
        """Get a certification by ID."""
        ...

    async def get_all(self) -> list[Certification]:
        """Get all certifications, ascending by order."""
        ...

    async def put(self, certification: Certification) -> Certification:
        """Insert or replace a certification."""
        ...

    async def delete(self, id: str) -> bool:
        """Delete a certification and return success status."""
        ...
