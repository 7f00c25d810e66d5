"""Profile Routes — plain CRUD, newest profile first."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import require_user
from app.core.errors import ResourceNotFoundError
from app.infrastructure.database import get_db
from app.models.profile import Profile
from app.schemas.common import dump, envelope, message
from app.schemas.profile import ProfilePayload, ProfileResponse

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/v1/profiles", tags=["profiles"],
    dependencies=[Depends(require_user)],
)


async def get_profile_or_404(profile_id: UUID, db: AsyncSession) -> Profile:
    profile = await db.get(Profile, profile_id)
    if not profile:
        raise ResourceNotFoundError("Profile", str(profile_id))
    return profile


def _serialize(profile: Profile) -> dict:
    return dump(ProfileResponse.model_validate(profile))


@router.get("")
async def list_profiles(db: AsyncSession = Depends(get_db)):
    result = await db.execute(
        select(Profile).order_by(Profile.created_at.desc()),
    )
    return envelope([_serialize(p) for p in result.scalars().all()])


@router.get("/{profile_id}")
async def get_profile(profile_id: UUID, db: AsyncSession = Depends(get_db)):
    return envelope(_serialize(await get_profile_or_404(profile_id, db)))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_profile(
    body: ProfilePayload, db: AsyncSession = Depends(get_db),
):
    profile = Profile(**body.to_columns())
    db.add(profile)
    await db.commit()
    await db.refresh(profile)
    return envelope(_serialize(profile))


@router.put("/{profile_id}")
async def update_profile(
    profile_id: UUID, body: ProfilePayload,
    db: AsyncSession = Depends(get_db),
):
    profile = await get_profile_or_404(profile_id, db)
    for column, value in body.to_columns().items():
        setattr(profile, column, value)
    await db.commit()
    await db.refresh(profile)
    return envelope(_serialize(profile))


@router.delete("/{profile_id}")
async def delete_profile(profile_id: UUID, db: AsyncSession = Depends(get_db)):
    profile = await get_profile_or_404(profile_id, db)
    await db.delete(profile)
    await db.commit()
    logger.info(f"Deleted profile {profile_id}")
    return message("Profile deleted successfully")
