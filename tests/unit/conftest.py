"""Shared fixtures for unit tests."""

from typing import Any, Iterable
from unittest.mock import AsyncMock

import pytest


def _echo(record: Any) -> Any:
    return record


class FakeUnitOfWork:
    """Fake Unit of Work with all 6 repository mocks for unit testing.

    ``put`` and ``replace_all`` echo their argument back, the way the real
    repositories return what they stored.
    """

    def __init__(self) -> None:
        self.profile = AsyncMock()
        self.projects = AsyncMock()
        self.categories = AsyncMock()
        self.certifications = AsyncMock()
        self.services = AsyncMock()
        self.contact_submissions = AsyncMock()
        for repository in (
            self.profile,
            self.projects,
            self.certifications,
            self.services,
        ):
            repository.put.side_effect = _echo
        self.categories.replace_all.side_effect = _echo
        self.services.replace_all.side_effect = _echo
        self.contact_submissions.create.side_effect = _echo
        self.categories.get_all.return_value = []
        self.committed = False
        self.rolled_back = False

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.rolled_back = True

    async def __aenter__(self) -> "FakeUnitOfWork":
        return self

    async def __aexit__(self, *args: Any) -> None:
        pass


class RecordingScheduler:
    """Cleanup scheduler that only records what it was handed."""

    def __init__(self) -> None:
        self.batches: list[list[str]] = []

    def schedule(self, candidates: Iterable[str]) -> None:
        self.batches.append(list(candidates))

    @property
    def scheduled(self) -> list[str]:
        return [reference for batch in self.batches for reference in batch]


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Create a fresh FakeUnitOfWork."""
    return FakeUnitOfWork()


@pytest.fixture
def scheduler() -> RecordingScheduler:
    return RecordingScheduler()
