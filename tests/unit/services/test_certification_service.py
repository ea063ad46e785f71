"""Unit tests for CertificationService."""

import pytest

from core.exceptions import CertificationNotFoundError, ValidationError
from domain.entities.attachment import Attachment
from domain.entities.certification import Certification
from domain.services.certification_service import CertificationService
from tests.unit.conftest import FakeUnitOfWork, RecordingScheduler


@pytest.fixture
def service(uow: FakeUnitOfWork, scheduler: RecordingScheduler) -> CertificationService:
    return CertificationService(lambda: uow, scheduler)


class TestCreate:
    @pytest.mark.asyncio
    async def test_creates_with_derived_palette(self, service: CertificationService, uow: FakeUnitOfWork):
        uow.certifications.get_all.return_value = [Certification(id="c1", order=1)]

        result = await service.create({"name": "AZ-900", "organization": "Microsoft", "year": 2021})

        assert result.id.startswith("cert-")
        assert result.palette_code == "provider-cyan"
        assert result.year == "2021"
        assert result.order == 2
        assert uow.committed

    @pytest.mark.asyncio
    async def test_inserts_first(self, service: CertificationService, uow: FakeUnitOfWork):
        uow.certifications.get_all.return_value = [Certification(id="c1", order=1)]

        result = await service.create({"name": "New", "order": 1})

        assert result.order == 1
        put = {call.args[0].id: call.args[0].order for call in uow.certifications.put.await_args_list}
        assert put == {result.id: 1, "c1": 2}


class TestUpdate:
    @pytest.mark.asyncio
    async def test_schedules_replaced_thumbnail_and_attachment(
        self, service: CertificationService, uow: FakeUnitOfWork, scheduler: RecordingScheduler
    ):
        uow.certifications.get.return_value = Certification(
            id="c1",
            thumbnail="/images/certifications/old.png",
            attachments=[Attachment(id="att-1", label="", url="/images/attachments/old.pdf")],
            order=3,
        )

        result = await service.update(
            "c1", {"thumbnail": "/images/certifications/new.png", "attachments": []}
        )

        assert result.order == 3
        assert scheduler.scheduled == [
            "/images/certifications/old.png",
            "/images/attachments/old.pdf",
        ]

    @pytest.mark.asyncio
    async def test_raises_when_missing(self, service: CertificationService, uow: FakeUnitOfWork):
        uow.certifications.get.return_value = None

        with pytest.raises(CertificationNotFoundError):
            await service.update("missing", {})


class TestDelete:
    @pytest.mark.asyncio
    async def test_deletes_and_reindexes(
        self, service: CertificationService, uow: FakeUnitOfWork, scheduler: RecordingScheduler
    ):
        uow.certifications.get.return_value = Certification(id="c2", order=2)
        uow.certifications.delete.return_value = True
        uow.certifications.get_all.return_value = [
            Certification(id="c1", order=1),
            Certification(id="c3", order=3),
        ]

        assert await service.delete("c2") is True

        put = {call.args[0].id: call.args[0].order for call in uow.certifications.put.await_args_list}
        assert put == {"c3": 2}
        assert scheduler.scheduled == []


class TestReorder:
    @pytest.mark.asyncio
    async def test_unknown_id(self, service: CertificationService, uow: FakeUnitOfWork):
        uow.certifications.get_all.return_value = [Certification(id="c1", order=1)]

        with pytest.raises(ValidationError, match="Unknown ID"):
            await service.reorder(["zzz"])
