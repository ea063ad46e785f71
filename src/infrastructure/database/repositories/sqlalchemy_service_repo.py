"""SQLAlchemy implementation of Service repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.service import Service
from infrastructure.database.models import ServiceModel


class SQLAlchemyServiceRepository:
    """SQLAlchemy implementation of IServiceRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: str) -> Service | None:
        """Get a service by ID."""
        model = await self._session.get(ServiceModel, id)
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[Service]:
        """Get all services ordered by sort order."""
        stmt = select(ServiceModel).order_by(ServiceModel.sort_order)
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def put(self, service: Service) -> Service:
        """Insert or replace a service."""
        model = await self._session.get(ServiceModel, service.id)
        if model is None:
            model = self._to_model(service)
            self._session.add(model)
        else:
            model.number = service.number
            model.title = service.title
            model.description = service.description
            model.icon = service.icon
            model.sort_order = service.order

        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, id: str) -> bool:
        """Delete a service."""
        model = await self._session.get(ServiceModel, id)
        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    async def replace_all(self, services: list[Service]) -> list[Service]:
        """Make the stored collection exactly ``services``."""
        keep = {service.id for service in services}
        result = await self._session.execute(select(ServiceModel))
        for model in result.scalars():
            if model.id not in keep:
                await self._session.delete(model)

        for service in services:
            await self.put(service)
        return await self.get_all()

    @staticmethod
    def _to_entity(model: ServiceModel) -> Service:
        """Convert ORM model to domain entity."""
        return Service(
            id=model.id,
            number=model.number,
            title=model.title,
            description=model.description,
            icon=model.icon,
            order=model.sort_order,
        )

    @staticmethod
    def _to_model(entity: Service) -> ServiceModel:
        """Convert domain entity to ORM model."""
        return ServiceModel(
            id=entity.id,
            number=entity.number,
            title=entity.title,
            description=entity.description,
            icon=entity.icon,
            sort_order=entity.order,
        )
