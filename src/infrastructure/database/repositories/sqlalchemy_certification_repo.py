"""SQLAlchemy implementation of Certification repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.certification import Certification
from domain.entities.payload import to_payload
from domain.normalizers.certification import normalize_certification
from infrastructure.database.models import CertificationModel


class SQLAlchemyCertificationRepository:
    """SQLAlchemy implementation of ICertificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: str) -> Certification | None:
        """Get a certification by ID."""
        model = await self._session.get(CertificationModel, id)
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[Certification]:
        """Get all certifications ordered by sort order."""
        stmt = select(CertificationModel).order_by(
            CertificationModel.sort_order, CertificationModel.created_at
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def put(self, certification: Certification) -> Certification:
        """Insert or replace a certification."""
        model = await self._session.get(CertificationModel, certification.id)
        if model is None:
            model = CertificationModel(id=certification.id)
            self._session.add(model)

        model.name = certification.name
        model.year = certification.year
        model.organization = certification.organization
        model.description = certification.description
        model.credential_url = certification.credential_url
        model.credential_id = certification.credential_id
        model.thumbnail = certification.thumbnail
        model.attachments = to_payload(certification)["attachments"]
        model.palette_code = certification.palette_code
        model.badge_color = certification.badge_color
        model.sort_order = certification.order

        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, id: str) -> bool:
        """Delete a certification."""
        model = await self._session.get(CertificationModel, id)
        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    @staticmethod
    def _to_entity(model: CertificationModel) -> Certification:
        """Convert ORM model to domain entity."""
        return normalize_certification(
            {
                "id": model.id,
                "name": model.name,
                "year": model.year,
                "organization": model.organization,
                "description": model.description,
                "credentialUrl": model.credential_url,
                "credentialId": model.credential_id,
                "thumbnail": model.thumbnail,
                "attachments": model.attachments,
                "paletteCode": model.palette_code,
                "badgeColor": model.badge_color,
                "order": model.sort_order,
            }
        )
