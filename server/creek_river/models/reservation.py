"""Reservation model definition."""

from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, Date, ForeignKey, Integer, inspect
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..core.database import Base

if TYPE_CHECKING:
    from .campsite import Campsite
    from .user_profile import UserProfile


def _is_loaded(instance, attribute: str) -> bool:
    return attribute not in inspect(instance).unloaded


class Reservation(Base):
    """Booking of one campsite by one user profile for a date range."""

    __tablename__ = "reservations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    campsite_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("campsites.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    user_profile_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("user_profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    checkin_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    checkout_date: Mapped[date] = mapped_column(Date, nullable=False)

    # Overlapping stays on one campsite are deliberately not constrained
    __table_args__ = (
        CheckConstraint("checkout_date > checkin_date", name="ck_reservation_checkout_after_checkin"),
    )

    # Relationships
    campsite: Mapped["Campsite"] = relationship("Campsite", back_populates="reservations")
    user_profile: Mapped["UserProfile"] = relationship("UserProfile", back_populates="reservations")

    @property
    def total_nights(self) -> int:
        """Whole nights between check-in and check-out."""
        return (self.checkout_date - self.checkin_date).days

    @property
    def total_cost(self) -> Decimal | None:
        """
        Nights multiplied by the campsite type's nightly fee.

        Returns None unless the campsite and its type were loaded with the
        reservation; this never triggers a lazy load.
        """
        if not _is_loaded(self, "campsite") or self.campsite is None:
            return None
        campsite = self.campsite
        if not _is_loaded(campsite, "campsite_type") or campsite.campsite_type is None:
            return None
        return campsite.campsite_type.fee_per_night * self.total_nights

    def __repr__(self) -> str:
        return (
            f"<Reservation(id={self.id}, campsite_id={self.campsite_id}, "
            f"user_profile_id={self.user_profile_id}, "
            f"{self.checkin_date}..{self.checkout_date})>"
        )
