"""Unit tests for reservation service."""

from datetime import date
from decimal import Decimal

import pytest

from creek_river.core.exceptions import CheckConstraintViolationError, ForeignKeyViolationError, NotFoundError
from creek_river.schemas.reservation import CreateReservationRequest
from creek_river.services.reservation_service import ReservationService


def _request(campsite_id, user_profile_id, checkin, checkout):
    return CreateReservationRequest(
        campsite_id=campsite_id,
        user_profile_id=user_profile_id,
        checkin_date=checkin,
        checkout_date=checkout
    )


@pytest.mark.asyncio
async def test_create_reservation(test_session, seeded):
    service = ReservationService(test_session)

    reservation = await service.create_reservation(
        _request(seeded["owl"], seeded["eve"], date(2023, 7, 18), date(2023, 7, 20))
    )

    assert reservation.id is not None
    assert reservation.total_nights == 2
    # Campsite was not loaded with the new reservation
    assert reservation.total_cost is None


@pytest.mark.asyncio
async def test_create_reservation_unknown_user(test_session, seeded):
    service = ReservationService(test_session)

    with pytest.raises(ForeignKeyViolationError):
        await service.create_reservation(
            _request(seeded["owl"], 9999, date(2023, 7, 18), date(2023, 7, 20))
        )

    assert await service.list_reservations() == []


@pytest.mark.asyncio
async def test_create_reservation_checkout_not_after_checkin(test_session, seeded):
    service = ReservationService(test_session)

    with pytest.raises(CheckConstraintViolationError) as exc_info:
        await service.create_reservation(
            _request(seeded["owl"], seeded["eve"], date(2023, 7, 20), date(2023, 7, 18))
        )

    assert exc_info.value.problem_details["code"] == "CHECK_VIOLATION"


@pytest.mark.asyncio
async def test_list_reservations_loads_relations(test_session, seeded):
    service = ReservationService(test_session)
    await service.create_reservation(
        _request(seeded["heron"], seeded["sam"], date(2024, 5, 1), date(2024, 5, 3))
    )

    [reservation] = await service.list_reservations()

    assert reservation.user_profile.email == "sam@reyes.com"
    assert reservation.campsite.campsite_type.campsite_type_name == "RV"
    assert reservation.total_cost == Decimal("53.00")


@pytest.mark.asyncio
async def test_cancel_reservation(test_session, seeded):
    service = ReservationService(test_session)
    reservation = await service.create_reservation(
        _request(seeded["owl"], seeded["eve"], date(2023, 7, 18), date(2023, 7, 20))
    )

    await service.cancel_reservation(reservation.id)

    assert await service.get_reservation_by_id(reservation.id) is None
    with pytest.raises(NotFoundError):
        await service.cancel_reservation(reservation.id)
