"""Models module exporting all database models."""

from .campsite import Campsite
from .campsite_type import CampsiteType
from .reservation import Reservation
from .user_profile import UserProfile

__all__ = [
    "CampsiteType",
    "Campsite",
    "UserProfile",
    "Reservation",
]
