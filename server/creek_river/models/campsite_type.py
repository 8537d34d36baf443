"""CampsiteType model definition."""

from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..core.database import Base

if TYPE_CHECKING:
    from .campsite import Campsite


class CampsiteType(Base):
    """Category of campsite that determines nightly fee and capacity."""

    __tablename__ = "campsite_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    campsite_type_name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    fee_per_night: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    max_occupants: Mapped[int] = mapped_column(Integer, nullable=False)

    __table_args__ = (
        CheckConstraint("fee_per_night >= 0", name="ck_campsite_type_fee_non_negative"),
        CheckConstraint("max_occupants > 0", name="ck_campsite_type_max_occupants_positive"),
    )

    # Relationships
    campsites: Mapped[list["Campsite"]] = relationship(
        "Campsite",
        back_populates="campsite_type",
    )

    def __repr__(self) -> str:
        return f"<CampsiteType(id={self.id}, name='{self.campsite_type_name}', fee={self.fee_per_night})>"
