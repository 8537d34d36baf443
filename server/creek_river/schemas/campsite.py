"""Campsite-related Pydantic schemas."""

from typing import Optional

from pydantic import Field

from .campsite_type import CampsiteType
from .common import DB_ID_MAX, CamelModel


class CampsiteRequest(CamelModel):
    """Request schema for creating or replacing a campsite."""

    nickname: str = Field(..., max_length=255, description="Display name of the site")
    image_url: Optional[str] = Field(None, max_length=2048, description="Photo of the site")
    campsite_type_id: int = Field(..., ge=1, le=DB_ID_MAX, description="Associated campsite type ID")


class CreateCampsiteRequest(CampsiteRequest):
    """Request schema for creating a campsite."""


class UpdateCampsiteRequest(CampsiteRequest):
    """Request schema for updating a campsite in place."""


class Campsite(CamelModel):
    """
    Campsite response schema.

    ``campsite_type`` is only populated by endpoints that expand it.
    """

    id: int = Field(..., description="Unique campsite ID")
    nickname: str = Field(..., description="Display name of the site")
    image_url: Optional[str] = Field(None, description="Photo of the site")
    campsite_type_id: int = Field(..., description="Associated campsite type ID")
    campsite_type: Optional[CampsiteType] = Field(None, description="Expanded campsite type")
