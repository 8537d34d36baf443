"""Campsite model definition."""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..core.database import Base

if TYPE_CHECKING:
    from .campsite_type import CampsiteType
    from .reservation import Reservation


class Campsite(Base):
    """Campsite entity representing a bookable site."""

    __tablename__ = "campsites"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    nickname: Mapped[str] = mapped_column(String(255), nullable=False)
    image_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)

    campsite_type_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("campsite_types.id"),
        nullable=False,
        index=True
    )

    # Relationships
    campsite_type: Mapped["CampsiteType"] = relationship("CampsiteType", back_populates="campsites")
    # Reservations are removed by ON DELETE CASCADE, never loaded for a delete
    reservations: Mapped[list["Reservation"]] = relationship(
        "Reservation",
        back_populates="campsite",
        cascade="all, delete-orphan",
        passive_deletes=True
    )

    def __repr__(self) -> str:
        return (
            f"<Campsite(id={self.id}, nickname='{self.nickname}', "
            f"campsite_type_id={self.campsite_type_id})>"
        )
