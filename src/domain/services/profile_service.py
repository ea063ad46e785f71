"""Profile service layer with business logic."""

from typing import Any, Callable, Mapping

from domain.entities.payload import to_payload
from domain.entities.profile import Profile
from domain.media import ICleanupScheduler, dropped_media, profile_media
from domain.normalizers.common import as_mapping
from domain.normalizers.profile import normalize_profile
from domain.repositories.unit_of_work import IUnitOfWork


class ProfileService:
    """Service layer for the singleton site profile."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        cleanup: ICleanupScheduler,
    ) -> None:
        self._uow_factory = uow_factory
        self._cleanup = cleanup

    async def get(self) -> Profile:
        """The stored profile, or an all-defaults profile when none exists yet."""
        async with self._uow_factory() as uow:
            profile = await uow.profile.get()
        return normalize_profile(to_payload(profile) if profile else {})

    async def update(self, payload: Mapping[str, Any]) -> Profile:
        """Merge ``payload`` over the stored profile and save it."""
        async with self._uow_factory() as uow:
            before = await uow.profile.get()
            base = to_payload(before) if before else {}
            profile = normalize_profile({**base, **as_mapping(payload)})
            saved = await uow.profile.put(profile)
            await uow.commit()

        if before is not None:
            self._cleanup.schedule(dropped_media(profile_media(before), profile_media(saved)))
        return saved
