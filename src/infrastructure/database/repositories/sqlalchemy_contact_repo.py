"""SQLAlchemy implementation of the contact submission repository."""

from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.contact import ContactSubmission
from infrastructure.database.models import ContactSubmissionModel


class SQLAlchemyContactSubmissionRepository:
    """SQLAlchemy implementation of IContactSubmissionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, submission: ContactSubmission) -> ContactSubmission:
        """Persist a new submission."""
        model = ContactSubmissionModel(
            id=submission.id,
            name=submission.name,
            email=submission.email,
            subject=submission.subject,
            message_text=submission.message_text,
            message_html=submission.message_html,
            created_at=submission.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        return submission
