"""Unit tests for campsite service."""

import pytest
from sqlalchemy import inspect

from creek_river.core.exceptions import ForeignKeyViolationError, NotFoundError
from creek_river.schemas.campsite import CreateCampsiteRequest, UpdateCampsiteRequest
from creek_river.services.campsite_service import CampsiteService


@pytest.mark.asyncio
async def test_create_campsite(test_session, seeded):
    service = CampsiteService(test_session)

    campsite = await service.create_campsite(
        CreateCampsiteRequest(nickname="Kingfisher", image_url=None, campsite_type_id=seeded["tent"])
    )

    assert campsite.id is not None
    assert campsite.nickname == "Kingfisher"
    assert campsite.campsite_type_id == seeded["tent"]


@pytest.mark.asyncio
async def test_create_campsite_unknown_type(test_session, seeded):
    service = CampsiteService(test_session)

    with pytest.raises(ForeignKeyViolationError) as exc_info:
        await service.create_campsite(
            CreateCampsiteRequest(nickname="Nowhere", campsite_type_id=9999)
        )

    assert exc_info.value.status_code == 400
    assert len(await service.list_campsites()) == 2


@pytest.mark.asyncio
async def test_get_campsite_by_id_include_type(test_session, seeded):
    service = CampsiteService(test_session)

    campsite = await service.get_campsite_by_id(seeded["heron"], include_type=True)

    assert campsite is not None
    assert "campsite_type" not in inspect(campsite).unloaded
    assert campsite.campsite_type.campsite_type_name == "RV"


@pytest.mark.asyncio
async def test_get_campsite_by_id_not_found(test_session, seeded):
    service = CampsiteService(test_session)

    assert await service.get_campsite_by_id(9999) is None
    with pytest.raises(NotFoundError):
        await service.get_campsite_by_id_or_raise(9999)


@pytest.mark.asyncio
async def test_update_campsite_overwrites_fields(test_session, seeded):
    service = CampsiteService(test_session)

    await service.update_campsite(
        seeded["owl"],
        UpdateCampsiteRequest(nickname="Screech Owl", image_url="https://img.test/screech.jpg", campsite_type_id=seeded["rv"])
    )

    campsite = await service.get_campsite_by_id(seeded["owl"])
    assert campsite.nickname == "Screech Owl"
    assert campsite.image_url == "https://img.test/screech.jpg"
    assert campsite.campsite_type_id == seeded["rv"]


@pytest.mark.asyncio
async def test_delete_campsite(test_session, seeded):
    service = CampsiteService(test_session)

    await service.delete_campsite(seeded["owl"])

    assert [c.id for c in await service.list_campsites()] == [seeded["heron"]]
    with pytest.raises(NotFoundError):
        await service.delete_campsite(seeded["owl"])
