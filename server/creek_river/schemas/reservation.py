"""Reservation-related Pydantic schemas."""

from datetime import date
from typing import Optional

from pydantic import Field

from .campsite import Campsite
from .common import DB_ID_MAX, CamelModel
from .user_profile import UserProfile


class CreateReservationRequest(CamelModel):
    """Request schema for booking a campsite."""

    campsite_id: int = Field(..., ge=1, le=DB_ID_MAX, description="Campsite to book")
    user_profile_id: int = Field(..., ge=1, le=DB_ID_MAX, description="Guest making the booking")
    checkin_date: date = Field(..., description="Arrival date (YYYY-MM-DD)")
    checkout_date: date = Field(..., description="Departure date (YYYY-MM-DD)")


class Reservation(CamelModel):
    """
    Reservation response schema.

    ``campsite``, ``user_profile`` and ``total_cost`` are only populated
    when the related rows were loaded.
    """

    id: int = Field(..., description="Unique reservation ID")
    campsite_id: int = Field(..., description="Booked campsite ID")
    user_profile_id: int = Field(..., description="Guest ID")
    checkin_date: date = Field(..., description="Arrival date")
    checkout_date: date = Field(..., description="Departure date")
    total_nights: int = Field(..., description="Nights between check-in and check-out")
    total_cost: Optional[float] = Field(None, description="Nights multiplied by the nightly fee")
    campsite: Optional[Campsite] = Field(None, description="Expanded campsite")
    user_profile: Optional[UserProfile] = Field(None, description="Expanded guest")
