"""Campsite service for query and command operations."""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from ..core.exceptions import NotFoundError, classify_integrity_error
from ..core.observability import metrics_collector
from ..models.campsite import Campsite
from ..schemas.campsite import CreateCampsiteRequest, UpdateCampsiteRequest

logger = logging.getLogger(__name__)


class CampsiteService:
    """Service for campsite-related operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _commit(self, campsite_id: Optional[int] = None) -> None:
        """Commit the unit of work, translating constraint violations."""
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            violation = classify_integrity_error(e, resource_type="campsite")
            logger.warning(
                "Campsite write rejected by database constraint",
                extra={
                    "campsite_id": campsite_id,
                    "code": violation.code,
                    "error": str(e.orig)
                }
            )
            raise violation from e

    async def list_campsites(self) -> list[Campsite]:
        """
        Get every campsite without expanding its type.

        Returns:
            All campsites ordered by ID
        """
        stmt = select(Campsite).order_by(Campsite.id)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_campsite_by_id(self, campsite_id: int, include_type: bool = False) -> Optional[Campsite]:
        """
        Get campsite by ID.

        Args:
            campsite_id: Campsite ID to search for
            include_type: Eagerly load the campsite type

        Returns:
            Campsite if found, None otherwise
        """
        stmt = select(Campsite).where(Campsite.id == campsite_id)
        if include_type:
            stmt = stmt.options(joinedload(Campsite.campsite_type)).execution_options(populate_existing=True)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_campsite_by_id_or_raise(self, campsite_id: int, include_type: bool = False) -> Campsite:
        """
        Get campsite by ID or raise NotFoundError.

        Raises:
            NotFoundError: If campsite not found
        """
        campsite = await self.get_campsite_by_id(campsite_id, include_type=include_type)
        if campsite is None:
            logger.warning("Campsite not found", extra={"campsite_id": campsite_id})
            raise NotFoundError(resource_type="campsite", resource_id=str(campsite_id))
        return campsite

    async def create_campsite(self, request: CreateCampsiteRequest) -> Campsite:
        """
        Create a new campsite.

        Args:
            request: Campsite creation request

        Returns:
            Created campsite entity

        Raises:
            ConstraintViolationError: If the campsite type does not exist
        """
        campsite = Campsite(
            nickname=request.nickname,
            image_url=request.image_url,
            campsite_type_id=request.campsite_type_id
        )

        self.db.add(campsite)
        await self._commit()
        await self.db.refresh(campsite)

        metrics_collector.record_campsite_created()
        logger.info(
            "Campsite created successfully",
            extra={
                "campsite_id": campsite.id,
                "nickname": campsite.nickname,
                "campsite_type_id": campsite.campsite_type_id
            }
        )

        return campsite

    async def update_campsite(self, campsite_id: int, request: UpdateCampsiteRequest) -> Campsite:
        """
        Overwrite a campsite's nickname, type reference and image URL in place.

        Raises:
            NotFoundError: If campsite not found
            ConstraintViolationError: If the new campsite type does not exist
        """
        campsite = await self.get_campsite_by_id_or_raise(campsite_id)

        campsite.nickname = request.nickname
        campsite.campsite_type_id = request.campsite_type_id
        campsite.image_url = request.image_url

        await self._commit(campsite_id)

        logger.info(
            "Campsite updated successfully",
            extra={
                "campsite_id": campsite_id,
                "nickname": campsite.nickname,
                "campsite_type_id": campsite.campsite_type_id
            }
        )

        return campsite

    async def delete_campsite(self, campsite_id: int) -> None:
        """
        Delete a campsite and, through the database cascade, its reservations.

        Raises:
            NotFoundError: If campsite not found
        """
        campsite = await self.get_campsite_by_id_or_raise(campsite_id)

        await self.db.delete(campsite)
        await self._commit(campsite_id)

        metrics_collector.record_campsite_deleted()
        logger.info("Campsite deleted", extra={"campsite_id": campsite_id})
