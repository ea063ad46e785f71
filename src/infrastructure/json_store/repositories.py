"""JSON file implementations of the content repositories.

Each repository works on an in-memory copy of its collection file, loaded
on first use. Nothing touches disk until the unit of work commits.
"""

from typing import Any, Callable, Generic, TypeVar

from domain.entities.certification import Certification
from domain.entities.contact import ContactSubmission
from domain.entities.payload import to_payload
from domain.entities.profile import Profile
from domain.entities.project import Project, ProjectCategory
from domain.entities.service import Service
from domain.normalizers.category import normalize_category_list
from domain.normalizers.certification import normalize_certification
from domain.normalizers.profile import normalize_profile
from domain.normalizers.project import normalize_project
from domain.normalizers.service import normalize_service
from domain.ordering import sort_by_order
from infrastructure.json_store.store import JsonFileStore

PROFILE_FILE = "profile.json"
PROJECTS_FILE = "projects.json"
CATEGORIES_FILE = "project-categories.json"
CERTIFICATIONS_FILE = "certifications.json"
SERVICES_FILE = "services.json"
CONTACT_SUBMISSIONS_FILE = "contact-submissions.json"

E = TypeVar("E")


class JsonCollection:
    """Lazily loaded contents of one collection file plus a dirty flag."""

    def __init__(self, store: JsonFileStore, name: str, default: Any) -> None:
        self._store = store
        self.name = name
        self._default = default
        self._data: Any = None
        self.dirty = False

    async def load(self) -> Any:
        if self._data is None:
            self._data = await self._store.read(self.name, self._default)
        return self._data

    def replace(self, data: Any) -> None:
        self._data = data
        self.dirty = True

    async def flush(self) -> None:
        if self.dirty:
            await self._store.write(self.name, self._data)
            self.dirty = False


class _JsonListRepository(Generic[E]):
    """Shared get/list/put/delete over a list of camelCase records keyed by ``id``."""

    def __init__(self, collection: JsonCollection, to_entity: Callable[[Any], E]) -> None:
        self._collection = collection
        self._to_entity = to_entity

    async def _records(self) -> list[dict[str, Any]]:
        data = await self._collection.load()
        return [item for item in data if isinstance(item, dict)] if isinstance(data, list) else []

    async def get(self, id: str) -> E | None:
        for record in await self._records():
            if record.get("id") == id:
                return self._to_entity(record)
        return None

    async def get_all(self) -> list[E]:
        return sort_by_order(self._to_entity(record) for record in await self._records())  # type: ignore[type-var]

    async def put(self, entity: E) -> E:
        payload = to_payload(entity)
        records = await self._records()
        for index, record in enumerate(records):
            if record.get("id") == payload["id"]:
                records[index] = payload
                break
        else:
            records.append(payload)
        self._collection.replace(records)
        return self._to_entity(payload)

    async def delete(self, id: str) -> bool:
        records = await self._records()
        remaining = [record for record in records if record.get("id") != id]
        if len(remaining) == len(records):
            return False
        self._collection.replace(remaining)
        return True

    async def replace_all(self, entities: list[E]) -> list[E]:
        self._collection.replace([to_payload(entity) for entity in entities])
        return await self.get_all()


class JsonProjectRepository(_JsonListRepository[Project]):
    def __init__(self, collection: JsonCollection) -> None:
        super().__init__(collection, normalize_project)


class JsonCertificationRepository(_JsonListRepository[Certification]):
    def __init__(self, collection: JsonCollection) -> None:
        super().__init__(collection, normalize_certification)


class JsonServiceRepository(_JsonListRepository[Service]):
    def __init__(self, collection: JsonCollection) -> None:
        super().__init__(collection, normalize_service)


class JsonCategoryRepository:
    def __init__(self, collection: JsonCollection) -> None:
        self._collection = collection

    async def get_all(self) -> list[ProjectCategory]:
        return normalize_category_list(
            await self._collection.load(), use_fallback_when_empty=False
        )

    async def replace_all(self, categories: list[ProjectCategory]) -> list[ProjectCategory]:
        self._collection.replace([to_payload(category) for category in categories])
        return await self.get_all()


class JsonProfileRepository:
    def __init__(self, collection: JsonCollection) -> None:
        self._collection = collection

    async def get(self) -> Profile | None:
        data = await self._collection.load()
        return normalize_profile(data) if isinstance(data, dict) and data else None

    async def put(self, profile: Profile) -> Profile:
        payload = to_payload(profile)
        self._collection.replace(payload)
        return normalize_profile(payload)


class JsonContactSubmissionRepository:
    def __init__(self, collection: JsonCollection) -> None:
        self._collection = collection

    async def create(self, submission: ContactSubmission) -> ContactSubmission:
        data = await self._collection.load()
        records = list(data) if isinstance(data, list) else []
        records.append(
            {
                "id": str(submission.id),
                "name": submission.name,
                "email": submission.email,
                "subject": submission.subject,
                "messageText": submission.message_text,
                "messageHtml": submission.message_html,
                "createdAt": submission.created_at.isoformat(),
            }
        )
        self._collection.replace(records)
        return submission
