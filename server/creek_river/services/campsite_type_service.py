"""Campsite type lookups."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.campsite_type import CampsiteType


class CampsiteTypeService:
    """Read-only access to campsite types."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_campsite_types(self) -> list[CampsiteType]:
        result = await self.db.execute(select(CampsiteType).order_by(CampsiteType.id))
        return list(result.scalars().all())
