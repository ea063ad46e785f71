"""Unit tests for CategoryService."""

import pytest

from core.exceptions import ValidationError
from domain.entities.project import Project, ProjectCategory
from domain.services.category_service import CategoryService
from tests.unit.conftest import FakeUnitOfWork


@pytest.fixture
def service(uow: FakeUnitOfWork) -> CategoryService:
    return CategoryService(lambda: uow)


class TestList:
    @pytest.mark.asyncio
    async def test_returns_stored_categories(self, service: CategoryService, uow: FakeUnitOfWork):
        uow.categories.get_all.return_value = [
            ProjectCategory(id="cat-b", label="B", order=2),
            ProjectCategory(id="cat-a", label="A", order=1),
        ]
        uow.projects.get_all.return_value = []

        result = await service.get_all()

        assert [category.id for category in result] == ["cat-a", "cat-b"]

    @pytest.mark.asyncio
    async def test_derives_from_projects_when_none_stored(
        self, service: CategoryService, uow: FakeUnitOfWork
    ):
        uow.projects.get_all.return_value = [Project(id="p1", categories=["Web", "AI"], order=1)]

        result = await service.get_all()

        assert [(category.id, category.label) for category in result] == [
            ("cat-web", "Web"),
            ("cat-ai", "AI"),
        ]


class TestUpdate:
    @pytest.mark.asyncio
    async def test_renames_propagate_in_one_commit(self, service: CategoryService, uow: FakeUnitOfWork):
        uow.categories.get_all.return_value = [ProjectCategory(id="cat-web", label="Web", order=1)]
        uow.projects.get_all.return_value = [
            Project(id="p1", categories=["Web"], order=1),
            Project(id="p2", categories=[], order=2),
        ]

        result = await service.update([{"id": "cat-web", "label": "Web Apps"}])

        assert [category.label for category in result] == ["Web Apps"]
        saved_projects = [call.args[0] for call in uow.projects.put.await_args_list]
        assert [(project.id, project.categories) for project in saved_projects] == [
            ("p1", ["Web Apps"])
        ]
        uow.categories.replace_all.assert_awaited_once()
        assert uow.committed

    @pytest.mark.asyncio
    async def test_rejects_non_list(self, service: CategoryService, uow: FakeUnitOfWork):
        with pytest.raises(ValidationError):
            await service.update({"label": "Web"})

        assert not uow.committed
