"""Campsite router for campsite query and command operations."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..schemas.campsite import Campsite, CreateCampsiteRequest, UpdateCampsiteRequest
from ..schemas.common import DB_ID_MAX, Problem
from ..schemas.converters import campsite_to_schema
from ..services.campsite_service import CampsiteService

router = APIRouter(prefix="/api/campsites", tags=["campsites"])

DB_DEPENDENCY = Depends(get_db)

CampsiteId = Annotated[int, Path(ge=1, le=DB_ID_MAX, description="Campsite ID")]


def _dump(schema) -> dict:
    return schema.model_dump(mode="json", by_alias=True)


@router.get("", response_model=list[Campsite])
async def list_campsites(db: AsyncSession = DB_DEPENDENCY) -> JSONResponse:
    """List every campsite. The campsite type is not expanded."""
    campsites = await CampsiteService(db).list_campsites()

    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=[_dump(campsite_to_schema(campsite)) for campsite in campsites]
    )


@router.get(
    "/{campsite_id}",
    response_model=Campsite,
    responses={404: {"model": Problem}}
)
async def get_campsite(campsite_id: CampsiteId, db: AsyncSession = DB_DEPENDENCY) -> JSONResponse:
    """Get one campsite with its campsite type expanded."""
    campsite = await CampsiteService(db).get_campsite_by_id_or_raise(campsite_id, include_type=True)

    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=_dump(campsite_to_schema(campsite, include_type=True))
    )


@router.post(
    "",
    response_model=Campsite,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": Problem}}
)
async def create_campsite(
    request: CreateCampsiteRequest,
    db: AsyncSession = DB_DEPENDENCY
) -> JSONResponse:
    """
    Create a new campsite.

    Responds 201 with a Location header pointing at the new campsite.
    """
    campsite = await CampsiteService(db).create_campsite(request)

    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=_dump(campsite_to_schema(campsite)),
        headers={"Location": f"/api/campsites/{campsite.id}"}
    )


@router.delete(
    "/{campsite_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": Problem}}
)
async def delete_campsite(campsite_id: CampsiteId, db: AsyncSession = DB_DEPENDENCY) -> Response:
    """Delete a campsite together with its reservations."""
    await CampsiteService(db).delete_campsite(campsite_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put(
    "/{campsite_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={400: {"model": Problem}, 404: {"model": Problem}}
)
async def update_campsite(
    campsite_id: CampsiteId,
    request: UpdateCampsiteRequest,
    db: AsyncSession = DB_DEPENDENCY
) -> Response:
    """Overwrite a campsite's nickname, campsite type and image URL."""
    await CampsiteService(db).update_campsite(campsite_id, request)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
