"""Read-only reference data: campsite types and guest profiles."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..schemas.campsite_type import CampsiteType
from ..schemas.user_profile import UserProfile
from ..services.campsite_type_service import CampsiteTypeService
from ..services.user_profile_service import UserProfileService

router = APIRouter(prefix="/api", tags=["reference"])

DB_DEPENDENCY = Depends(get_db)


@router.get("/campsitetypes", response_model=list[CampsiteType])
async def list_campsite_types(db: AsyncSession = DB_DEPENDENCY) -> JSONResponse:
    campsite_types = await CampsiteTypeService(db).list_campsite_types()
    return JSONResponse(
        content=[
            CampsiteType.model_validate(campsite_type).model_dump(mode="json", by_alias=True)
            for campsite_type in campsite_types
        ]
    )


@router.get("/userprofiles", response_model=list[UserProfile])
async def list_user_profiles(db: AsyncSession = DB_DEPENDENCY) -> JSONResponse:
    user_profiles = await UserProfileService(db).list_user_profiles()
    return JSONResponse(
        content=[
            UserProfile.model_validate(user_profile).model_dump(mode="json", by_alias=True)
            for user_profile in user_profiles
        ]
    )
