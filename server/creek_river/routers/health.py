"""Readiness router backed by a real database check."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db, ping_db
from ..core.exceptions import ServiceUnavailableError
from ..core.observability import SERVICE_NAME
from ..schemas.common import Problem
from ..schemas.health import ReadinessResponse, ReadinessStatus

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"model": Problem}},
    summary="Readiness Check",
    description="Check that the service can reach its database",
)
async def readiness_check(db: AsyncSession = Depends(get_db)) -> JSONResponse:
    """
    Readiness check endpoint that verifies the database connection.

    Returns:
        JSONResponse: Readiness status information
    """
    try:
        await ping_db(db)
    except (SQLAlchemyError, OSError) as e:
        logger.error("Readiness check failed", extra={"error": str(e)})
        raise ServiceUnavailableError("database") from e

    response_data = ReadinessResponse(
        status=ReadinessStatus.READY,
        service=SERVICE_NAME,
        checks={"database": "ok"}
    )
    return JSONResponse(status_code=200, content=response_data.model_dump(mode="json"))
