"""Service layer package."""

from .campsite_service import CampsiteService
from .campsite_type_service import CampsiteTypeService
from .reservation_service import ReservationService
from .user_profile_service import UserProfileService

__all__ = [
    "CampsiteService",
    "CampsiteTypeService",
    "ReservationService",
    "UserProfileService",
]
