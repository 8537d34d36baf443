"""User profile lookups."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.user_profile import UserProfile


class UserProfileService:
    """Read-only access to guest profiles."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_user_profiles(self) -> list[UserProfile]:
        result = await self.db.execute(select(UserProfile).order_by(UserProfile.id))
        return list(result.scalars().all())
