"""Profile repository protocol."""

from typing import Protocol

from domain.entities.profile import Profile


class IProfileRepository(Protocol):
    """Repository for the singleton profile record (key ``"default"``)."""

    async def get(self) -> Profile | None:
        """Get the stored profile, if any."""
        ...

    async def put(self, profile: Profile) -> Profile:
        """Create or replace the profile."""
        ...
