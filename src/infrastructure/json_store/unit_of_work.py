"""Unit of Work over the JSON file store."""

from typing import Any, Optional

from infrastructure.json_store.repositories import (
    CATEGORIES_FILE,
    CERTIFICATIONS_FILE,
    CONTACT_SUBMISSIONS_FILE,
    PROFILE_FILE,
    PROJECTS_FILE,
    SERVICES_FILE,
    JsonCategoryRepository,
    JsonCertificationRepository,
    JsonCollection,
    JsonContactSubmissionRepository,
    JsonProfileRepository,
    JsonProjectRepository,
    JsonServiceRepository,
)
from infrastructure.json_store.store import JsonFileStore


class JsonFileUnitOfWork:
    """Collects changes in memory; ``commit`` rewrites the touched files."""

    def __init__(self, store: JsonFileStore) -> None:
        self._store = store
        self._collections: dict[str, JsonCollection] = {}

    def _collection(self, name: str, default: Any) -> JsonCollection:
        if name not in self._collections:
            self._collections[name] = JsonCollection(self._store, name, default)
        return self._collections[name]

    @property
    def profile(self) -> JsonProfileRepository:
        return JsonProfileRepository(self._collection(PROFILE_FILE, {}))

    @property
    def projects(self) -> JsonProjectRepository:
        return JsonProjectRepository(self._collection(PROJECTS_FILE, []))

    @property
    def categories(self) -> JsonCategoryRepository:
        return JsonCategoryRepository(self._collection(CATEGORIES_FILE, []))

    @property
    def certifications(self) -> JsonCertificationRepository:
        return JsonCertificationRepository(self._collection(CERTIFICATIONS_FILE, []))

    @property
    def services(self) -> JsonServiceRepository:
        return JsonServiceRepository(self._collection(SERVICES_FILE, []))

    @property
    def contact_submissions(self) -> JsonContactSubmissionRepository:
        return JsonContactSubmissionRepository(self._collection(CONTACT_SUBMISSIONS_FILE, []))

    async def commit(self) -> None:
        for collection in self._collections.values():
            await collection.flush()

    async def rollback(self) -> None:
        self._collections.clear()

    async def __aenter__(self) -> "JsonFileUnitOfWork":
        self._collections = {}
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[Exception],
        exc_tb: Any,
    ) -> None:
        if exc_type:
            await self.rollback()
        self._collections.clear()
