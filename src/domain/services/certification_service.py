"""Certification service layer with business logic."""

from typing import Any, Callable, Mapping, Sequence

import structlog

from core.exceptions import CertificationNotFoundError
from domain.entities.certification import Certification
from domain.entities.payload import to_payload
from domain.ids import CERTIFICATION_ID_PREFIX, new_record_id
from domain.media import ICleanupScheduler, certification_media, dropped_media
from domain.normalizers.certification import normalize_certification
from domain.normalizers.common import as_mapping, parse_int
from domain.ordering import apply_reorder, persist_order_changes, reindex, sort_by_order
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class CertificationService:
    """Service layer for Certification business logic."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        cleanup: ICleanupScheduler,
    ) -> None:
        self._uow_factory = uow_factory
        self._cleanup = cleanup

    async def get_all(self) -> list[Certification]:
        async with self._uow_factory() as uow:
            certifications = await uow.certifications.get_all()
        return sort_by_order(
            normalize_certification(to_payload(certification)) for certification in certifications
        )

    async def get(self, certification_id: str) -> Certification:
        async with self._uow_factory() as uow:
            certification = await uow.certifications.get(certification_id)
        if not certification:
            raise CertificationNotFoundError(certification_id)
        return normalize_certification(to_payload(certification))

    async def create(self, payload: Mapping[str, Any]) -> Certification:
        """Create a certification at ``order`` (default: last)."""
        data = as_mapping(payload)
        async with self._uow_factory() as uow:
            existing = sort_by_order(await uow.certifications.get_all())
            certification = normalize_certification(
                {**data, "id": new_record_id(CERTIFICATION_ID_PREFIX)}
            )

            requested = parse_int(data.get("order"))
            position = len(existing) if requested is None else requested - 1
            position = min(max(position, 0), len(existing))

            sequence = [*existing[:position], certification, *existing[position:]]
            created = await persist_order_changes(
                uow.certifications, existing, reindex(sequence)
            )
            await uow.commit()

        logger.info("certification_created", certification_id=certification.id)
        return created[certification.id]

    async def update(self, certification_id: str, payload: Mapping[str, Any]) -> Certification:
        async with self._uow_factory() as uow:
            before = await uow.certifications.get(certification_id)
            if not before:
                raise CertificationNotFoundError(certification_id)

            merged = {**to_payload(before), **as_mapping(payload)}
            certification = normalize_certification(
                {**merged, "id": certification_id, "order": before.order}
            )
            saved = await uow.certifications.put(certification)
            await uow.commit()

        self._cleanup.schedule(
            dropped_media(certification_media(before), certification_media(saved))
        )
        return saved

    async def delete(self, certification_id: str) -> bool:
        async with self._uow_factory() as uow:
            target = await uow.certifications.get(certification_id)
            if not target:
                raise CertificationNotFoundError(certification_id)

            deleted = await uow.certifications.delete(certification_id)
            remaining = sort_by_order(
                certification
                for certification in await uow.certifications.get_all()
                if certification.id != certification_id
            )
            await persist_order_changes(uow.certifications, remaining, reindex(remaining))
            await uow.commit()

        self._cleanup.schedule(certification_media(target))
        return deleted

    async def reorder(self, ordered_ids: Sequence[str]) -> list[Certification]:
        async with self._uow_factory() as uow:
            existing = await uow.certifications.get_all()
            reordered = apply_reorder(existing, ordered_ids)
            await persist_order_changes(uow.certifications, existing, reordered)
            await uow.commit()
        return reordered
