"""UserProfile-related Pydantic schemas."""

from pydantic import Field

from .common import CamelModel


class UserProfile(CamelModel):
    """User profile response schema."""

    id: int = Field(..., description="Unique user profile ID")
    first_name: str = Field(..., description="Guest first name")
    last_name: str = Field(..., description="Guest last name")
    email: str = Field(..., description="Guest email address")
