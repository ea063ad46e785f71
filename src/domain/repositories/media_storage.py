"""Media (object) storage protocol."""

from typing import Protocol, Sequence


class IMediaStorage(Protocol):
    """Stores uploaded binaries and hands back the reference content records use.

    A *reference* is the string stored in content fields: a site-relative
    path such as ``/images/projects/a.png`` or a public bucket URL.
    """

    def key(self, reference: str) -> str | None:
        """Identity of the stored object ``reference`` points at, or None if not ours.

        Two references with the same key name the same object, so reference
        counting must compare keys rather than raw strings.
        """
        ...

    def owns(self, reference: str) -> bool:
        """Whether ``reference`` points into this storage."""
        ...

    async def upload(self, path: str, data: bytes, content_type: str) -> str:
        """Store ``data`` under ``path`` (relative to the media root); return its reference."""
        ...

    async def delete(self, references: Sequence[str]) -> list[str]:
        """Delete stored objects; return the references actually removed.

        Raises:
            MediaCleanupFailure: if the backend rejects the deletion
        """
        ...

    async def list_objects(self, prefix: str = "") -> list[str]:
        """References of every stored object under ``prefix``."""
        ...
