"""Service repository protocol."""

from typing import Protocol

from domain.entities.service import Service


class IServiceRepository(Protocol):
    """Repository interface for Service entities."""

    async def get(self, id: str) -> Service | None:
        """Get a service by ID."""
        ...

    async def get_all(self) -> list[Service]:
        """Get all services, ascending by order."""
        ...

    async def put(self, service: Service) -> Service:
        """Insert or replace a service."""
        ...

    async def delete(self, id: str) -> bool:
        """Delete a service and return success status."""
        ...

    async def replace_all(self, services: list[Service]) -> list[Service]:
        """Replace the whole collection with ``services``."""
        ...
