"""Conversions from ORM models to response schemas."""

from ..models.campsite import Campsite as CampsiteModel
from ..models.reservation import Reservation as ReservationModel
from .campsite import Campsite
from .campsite_type import CampsiteType
from .reservation import Reservation
from .user_profile import UserProfile


def campsite_to_schema(campsite_model: CampsiteModel, include_type: bool = False) -> Campsite:
    """Convert campsite model to schema, expanding the type only when asked."""
    campsite_type = None
    if include_type and campsite_model.campsite_type is not None:
        campsite_type = CampsiteType.model_validate(campsite_model.campsite_type)

    return Campsite(
        id=campsite_model.id,
        nickname=campsite_model.nickname,
        image_url=campsite_model.image_url,
        campsite_type_id=campsite_model.campsite_type_id,
        campsite_type=campsite_type
    )


def reservation_to_schema(reservation_model: ReservationModel, expand: bool = False) -> Reservation:
    """Convert reservation model to schema; ``expand`` adds guest and campsite."""
    campsite = None
    user_profile = None
    if expand:
        campsite = campsite_to_schema(reservation_model.campsite, include_type=True)
        user_profile = UserProfile.model_validate(reservation_model.user_profile)

    return Reservation(
        id=reservation_model.id,
        campsite_id=reservation_model.campsite_id,
        user_profile_id=reservation_model.user_profile_id,
        checkin_date=reservation_model.checkin_date,
        checkout_date=reservation_model.checkout_date,
        total_nights=reservation_model.total_nights,
        total_cost=reservation_model.total_cost,
        campsite=campsite,
        user_profile=user_profile
    )
