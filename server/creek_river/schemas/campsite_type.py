"""CampsiteType-related Pydantic schemas."""

from pydantic import Field

from .common import CamelModel


class CampsiteType(CamelModel):
    """Campsite type response schema."""

    id: int = Field(..., description="Unique campsite type ID")
    campsite_type_name: str = Field(..., description="Category name, e.g. Tent or RV")
    fee_per_night: float = Field(..., ge=0, description="Nightly fee")
    max_occupants: int = Field(..., ge=1, description="Maximum occupants per site")
