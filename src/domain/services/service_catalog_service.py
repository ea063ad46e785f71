"""Service catalog (the "what I do" list) business logic."""

from typing import Any, Callable, Mapping, Sequence

import structlog

from core.exceptions import ServiceNotFoundError, ValidationError
from domain.entities.payload import to_payload
from domain.entities.service import Service
from domain.ids import SERVICE_ID_PREFIX, new_record_id
from domain.media import ICleanupScheduler, dropped_media, service_media
from domain.normalizers.common import as_mapping, parse_int
from domain.normalizers.service import normalize_service
from domain.ordering import apply_reorder, persist_order_changes, reindex, sort_by_order
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


def _media_of(services: Sequence[Service]) -> list[str]:
    return [reference for service in services for reference in service_media(service)]


class ServiceCatalogService:
    """Service layer for the offered services list."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        cleanup: ICleanupScheduler,
    ) -> None:
        self._uow_factory = uow_factory
        self._cleanup = cleanup

    async def get_all(self) -> list[Service]:
        async with self._uow_factory() as uow:
            services = await uow.services.get_all()
        ordered = sort_by_order(services)
        return [
            normalize_service(to_payload(service), position=index + 1)
            for index, service in enumerate(ordered)
        ]

    async def create(self, payload: Mapping[str, Any]) -> Service:
        data = as_mapping(payload)
        async with self._uow_factory() as uow:
            existing = sort_by_order(await uow.services.get_all())

            requested = parse_int(data.get("order"))
            position = len(existing) if requested is None else requested - 1
            position = min(max(position, 0), len(existing))

            service = normalize_service(
                {**data, "id": new_record_id(SERVICE_ID_PREFIX)}, position=position + 1
            )
            sequence = [*existing[:position], service, *existing[position:]]
            created = await persist_order_changes(uow.services, existing, reindex(sequence))
            await uow.commit()

        logger.info("service_created", service_id=service.id)
        return created[service.id]

    async def update(self, service_id: str, payload: Mapping[str, Any]) -> Service:
        async with self._uow_factory() as uow:
            before = await uow.services.get(service_id)
            if not before:
                raise ServiceNotFoundError(service_id)

            merged = {**to_payload(before), **as_mapping(payload)}
            service = normalize_service(
                {**merged, "id": service_id, "order": before.order}, position=before.order
            )
            saved = await uow.services.put(service)
            await uow.commit()

        self._cleanup.schedule(dropped_media(service_media(before), service_media(saved)))
        return saved

    async def delete(self, service_id: str) -> bool:
        async with self._uow_factory() as uow:
            target = await uow.services.get(service_id)
            if not target:
                raise ServiceNotFoundError(service_id)

            deleted = await uow.services.delete(service_id)
            remaining = sort_by_order(
                service for service in await uow.services.get_all() if service.id != service_id
            )
            await persist_order_changes(uow.services, remaining, reindex(remaining))
            await uow.commit()

        self._cleanup.schedule(service_media(target))
        return deleted

    async def reorder(self, ordered_ids: Sequence[str]) -> list[Service]:
        async with self._uow_factory() as uow:
            existing = await uow.services.get_all()
            reordered = apply_reorder(existing, ordered_ids)
            await persist_order_changes(uow.services, existing, reordered)
            await uow.commit()
        return reordered

    async def replace_all(self, payload: Any) -> list[Service]:
        """Replace the whole list with ``payload``, in the sequence given.

        Entries without an id (or repeating one already used) get a fresh id.
        Icons no longer used by any service are handed to media cleanup.
        """
        if not isinstance(payload, list):
            raise ValidationError("Services payload must be a list")

        seen: set[str] = set()
        services: list[Service] = []
        for index, item in enumerate(payload):
            service = normalize_service(item, position=index + 1)
            if not service.id or service.id in seen:
                service.id = new_record_id(SERVICE_ID_PREFIX)
            seen.add(service.id)
            services.append(service)
        services = reindex(services)

        async with self._uow_factory() as uow:
            previous = await uow.services.get_all()
            saved = await uow.services.replace_all(services)
            await uow.commit()

        logger.info("services_replaced", count=len(saved))
        self._cleanup.schedule(dropped_media(_media_of(previous), _media_of(saved)))
        return saved
