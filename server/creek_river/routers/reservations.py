"""Reservation router for booking operations."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..schemas.common import DB_ID_MAX, Problem
from ..schemas.converters import reservation_to_schema
from ..schemas.reservation import CreateReservationRequest, Reservation
from ..services.reservation_service import ReservationService

router = APIRouter(prefix="/api/reservations", tags=["reservations"])

DB_DEPENDENCY = Depends(get_db)

ReservationId = Annotated[int, Path(ge=1, le=DB_ID_MAX, description="Reservation ID")]


@router.get("", response_model=list[Reservation])
async def list_reservations(db: AsyncSession = DB_DEPENDENCY) -> JSONResponse:
    """
    List every reservation ordered by check-in date.

    Each reservation includes its guest, its campsite and the campsite's type.
    """
    reservations = await ReservationService(db).list_reservations()

    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=[
            reservation_to_schema(reservation, expand=True).model_dump(mode="json", by_alias=True)
            for reservation in reservations
        ]
    )


@router.post(
    "",
    response_model=Reservation,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": Problem}}
)
async def create_reservation(
    request: CreateReservationRequest,
    db: AsyncSession = DB_DEPENDENCY
) -> JSONResponse:
    """
    Book a campsite.

    Responds 400 when the database rejects the reservation, for example an
    unknown campsite or guest, or a check-out that is not after check-in.
    """
    reservation = await ReservationService(db).create_reservation(request)
    response_data = reservation_to_schema(reservation)

    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=response_data.model_dump(mode="json", by_alias=True),
        headers={"Location": f"/api/reservations/{reservation.id}"}
    )


@router.delete(
    "/{reservation_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": Problem}}
)
async def cancel_reservation(reservation_id: ReservationId, db: AsyncSession = DB_DEPENDENCY) -> Response:
    """Cancel a reservation."""
    await ReservationService(db).cancel_reservation(reservation_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
