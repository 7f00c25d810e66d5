"""Work Experience Routes — plain CRUD, newest start date first."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import require_user
from app.core.errors import ResourceNotFoundError
from app.infrastructure.database import get_db
from app.models.work_experience import WorkExperience
from app.schemas.common import dump, envelope, message
from app.schemas.experience import ExperiencePayload, ExperienceResponse

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/v1/experiences", tags=["experiences"],
    dependencies=[Depends(require_user)],
)


async def get_experience_or_404(
    experience_id: UUID, db: AsyncSession,
) -> WorkExperience:
    experience = await db.get(WorkExperience, experience_id)
    if not experience:
        raise ResourceNotFoundError("Experience", str(experience_id))
    return experience


def _serialize(experience: WorkExperience) -> dict:
    return dump(ExperienceResponse.model_validate(experience))


@router.get("")
async def list_experiences(db: AsyncSession = Depends(get_db)):
    result = await db.execute(
        select(WorkExperience).order_by(WorkExperience.start_date.desc()),
    )
    return envelope([_serialize(e) for e in result.scalars().all()])


@router.get("/{experience_id}")
async def get_experience(
    experience_id: UUID, db: AsyncSession = Depends(get_db),
):
    return envelope(_serialize(await get_experience_or_404(experience_id, db)))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_experience(
    body: ExperiencePayload, db: AsyncSession = Depends(get_db),
):
    experience = WorkExperience(**body.model_dump())
    db.add(experience)
    await db.commit()
    await db.refresh(experience)
    return envelope(_serialize(experience))


@router.put("/{experience_id}")
async def update_experience(
    experience_id: UUID, body: ExperiencePayload,
    db: AsyncSession = Depends(get_db),
):
    experience = await get_experience_or_404(experience_id, db)
    for column, value in body.model_dump().items():
        setattr(experience, column, value)
    await db.commit()
    await db.refresh(experience)
    return envelope(_serialize(experience))


@router.delete("/{experience_id}")
async def delete_experience(
    experience_id: UUID, db: AsyncSession = Depends(get_db),
):
    experience = await get_experience_or_404(experience_id, db)
    await db.delete(experience)
    await db.commit()
    logger.info(f"Deleted experience {experience_id}")
    return message("Experience deleted successfully")
