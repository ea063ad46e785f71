"""Reference counting and cleanup of orphaned media.

After an edit replaces or removes an image, the old reference is handed to
the sweeper. It is deleted from media storage only when no live content
record (profile, projects, certifications, services) still points at it.
"""

from collections.abc import Iterable, Sequence
from typing import Callable, Protocol

import structlog

from core.exceptions import MediaCleanupFailure
from domain.entities.certification import Certification
from domain.entities.profile import Profile
from domain.entities.project import DEFAULT_PROJECT_THUMBNAIL, Project
from domain.entities.service import Service
from domain.normalizers.html import find_img_sources
from domain.repositories.media_storage import IMediaStorage
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()

PROTECTED_MEDIA = frozenset(
    {
        DEFAULT_PROJECT_THUMBNAIL,
        "/images/projects/placeholder-2.svg",
        "/images/projects/placeholder-3.svg",
        "/images/profile/photo.svg",
    }
)


class ICleanupScheduler(Protocol):
    """Hands candidate references to the sweeper without waiting for it."""

    def schedule(self, candidates: Iterable[str]) -> None:
        ...


def _present(values: Iterable[str]) -> list[str]:
    return [value.strip() for value in values if isinstance(value, str) and value.strip()]


def profile_media(profile: Profile) -> list[str]:
    return _present([profile.profile_photo, profile.favicon, *find_img_sources(profile.bio)])


def project_media(project: Project) -> list[str]:
    return _present(
        [
            project.thumbnail,
            *project.gallery,
            *(attachment.url for attachment in project.attachments),
            *find_img_sources(project.description),
        ]
    )


def certification_media(certification: Certification) -> list[str]:
    return _present(
        [certification.thumbnail, *(attachment.url for attachment in certification.attachments)]
    )


def service_media(service: Service) -> list[str]:
    return _present([service.icon])


def dropped_media(before: Iterable[str], after: Iterable[str]) -> list[str]:
    """References present in ``before`` but not in ``after``: cleanup candidates of an edit."""
    remaining = set(after)
    return list(dict.fromkeys(reference for reference in before if reference not in remaining))


def collect_referenced_media(
    profile: Profile | None,
    projects: Sequence[Project],
    certifications: Sequence[Certification],
    services: Sequence[Service],
) -> set[str]:
    """Every media reference held by live content."""
    references: set[str] = set()
    if profile is not None:
        references.update(profile_media(profile))
    for project in projects:
        references.update(project_media(project))
    for certification in certifications:
        references.update(certification_media(certification))
    for service in services:
        references.update(service_media(service))
    return references


class MediaSweeper:
    """Deletes media that no content references any more."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        storage: IMediaStorage,
    ) -> None:
        self._uow_factory = uow_factory
        self._storage = storage

    async def referenced_media(self) -> set[str]:
        async with self._uow_factory() as uow:
            profile = await uow.profile.get()
            projects = await uow.projects.get_all()
            certifications = await uow.certifications.get_all()
            services = await uow.services.get_all()
        return collect_referenced_media(profile, projects, certifications, services)

    async def referenced_keys(self) -> set[str]:
        """Storage keys of every reference live content holds."""
        return self._keys(await self.referenced_media())

    def _keys(self, references: Iterable[str]) -> set[str]:
        return {key for reference in references if (key := self._storage.key(reference))}

    def _eligible(self, candidates: Iterable[str]) -> dict[str, str]:
        """Candidates this storage owns, keyed by object, protected media left out."""
        protected = self._keys(PROTECTED_MEDIA)
        eligible: dict[str, str] = {}
        for candidate in _present(candidates):
            key = self._storage.key(candidate)
            if key is None or key in protected:
                continue
            eligible.setdefault(key, candidate)
        return eligible

    async def remove_if_unused(self, candidates: Iterable[str]) -> list[str]:
        """Delete the candidates nothing references; return what was deleted.

        A candidate that fails to delete is logged and skipped; the rest of
        the batch still runs.
        """
        eligible = self._eligible(candidates)
        if not eligible:
            return []

        live = await self.referenced_keys()
        deleted: list[str] = []
        for key, candidate in eligible.items():
            if key in live:
                continue
            try:
                removed = await self._storage.delete([candidate])
            except MediaCleanupFailure as exc:
                logger.warning(
                    "media_cleanup_failed",
                    reference=candidate,
                    error=exc.message,
                )
                continue
            if removed:
                logger.info("media_orphan_deleted", reference=candidate)
                deleted.extend(removed)
        return deleted

    async def cleanup_all_unused(self) -> list[str]:
        """Sweep the whole media root for objects no content references."""
        stored = await self._storage.list_objects()
        live = await self.referenced_keys()
        orphaned = [reference for reference in stored if self._storage.key(reference) not in live]
        deleted = await self.remove_if_unused(orphaned)
        logger.info(
            "media_full_sweep_completed",
            stored_count=len(stored),
            deleted_count=len(deleted),
        )
        return deleted
