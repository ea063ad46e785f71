"""Contact submission repository protocol."""

from typing import Protocol

from domain.entities.contact import ContactSubmission


class IContactSubmissionRepository(Protocol):
    """Append-only store of contact form submissions."""

    async def create(self, submission: ContactSubmission) -> ContactSubmission:
        """Persist a new submission."""
        ...
