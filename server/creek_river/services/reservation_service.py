"""Reservation service for query and command operations."""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..core.exceptions import NotFoundError, classify_integrity_error
from ..core.observability import metrics_collector
from ..models.campsite import Campsite
from ..models.reservation import Reservation
from ..schemas.reservation import CreateReservationRequest

logger = logging.getLogger(__name__)


class ReservationService:
    """Service for reservation-related operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_reservations(self) -> list[Reservation]:
        """
        Get every reservation with its guest, campsite and campsite type.

        Returns:
            Reservations ordered by ascending check-in date, then ID
        """
        stmt = (
            select(Reservation)
            .options(
                selectinload(Reservation.user_profile),
                selectinload(Reservation.campsite).selectinload(Campsite.campsite_type),
            )
            .order_by(Reservation.checkin_date.asc(), Reservation.id.asc())
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_reservation_by_id(self, reservation_id: int) -> Optional[Reservation]:
        """
        Get reservation by ID.

        Returns:
            Reservation if found, None otherwise
        """
        stmt = select(Reservation).where(Reservation.id == reservation_id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def create_reservation(self, request: CreateReservationRequest) -> Reservation:
        """
        Book a campsite for a guest.

        No availability check is made; overlapping stays are accepted.

        Args:
            request: Reservation creation request

        Returns:
            Created reservation entity

        Raises:
            ConstraintViolationError: If the campsite or guest does not exist,
                or check-out is not after check-in
        """
        reservation = Reservation(
            campsite_id=request.campsite_id,
            user_profile_id=request.user_profile_id,
            checkin_date=request.checkin_date,
            checkout_date=request.checkout_date
        )

        self.db.add(reservation)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            violation = classify_integrity_error(e, resource_type="reservation")
            metrics_collector.record_reservation_rejected(violation.code)
            logger.warning(
                "Reservation rejected by database constraint",
                extra={
                    "campsite_id": request.campsite_id,
                    "user_profile_id": request.user_profile_id,
                    "code": violation.code,
                    "error": str(e.orig)
                }
            )
            raise violation from e

        await self.db.refresh(reservation)

        metrics_collector.record_reservation_created(reservation.campsite_id)
        logger.info(
            "Reservation created successfully",
            extra={
                "reservation_id": reservation.id,
                "campsite_id": reservation.campsite_id,
                "user_profile_id": reservation.user_profile_id,
                "checkin_date": reservation.checkin_date.isoformat(),
                "checkout_date": reservation.checkout_date.isoformat()
            }
        )

        return reservation

    async def cancel_reservation(self, reservation_id: int) -> None:
        """
        Cancel (delete) a reservation.

        Raises:
            NotFoundError: If reservation not found
        """
        reservation = await self.get_reservation_by_id(reservation_id)
        if reservation is None:
            logger.warning("Reservation not found", extra={"reservation_id": reservation_id})
            raise NotFoundError(resource_type="reservation", resource_id=str(reservation_id))

        await self.db.delete(reservation)
        await self.db.commit()

        metrics_collector.record_reservation_cancelled()
        logger.info("Reservation cancelled", extra={"reservation_id": reservation_id})
