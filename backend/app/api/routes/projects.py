"""Project Routes — CRUD plus the ordering endpoints (toggle, reorder, rebalance).

Invariants:
    - Every display_order change goes through DisplayOrderManager; routes never set it
    - Create appends to the end of the project's partition
    - Delete rebalances the partition the project left
    - A featured change (toggle or update) rebalances both partitions in the same commit
    - Static paths (/reorder, /rebalance, /featured, /regular) declared before /{project_id}

Design Decisions:
    - One commit per request; reorder owns its own commit/rollback for atomicity
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import require_user
from app.core.domain_types import ProjectStatus
from app.core.errors import ResourceNotFoundError
from app.infrastructure.database import get_db
from app.models.project import Project
from app.schemas.common import dump, envelope, message
from app.schemas.project import (
    ProjectCreate, ProjectResponse, ProjectUpdate, ReorderRequest,
)
from app.services.display_order_manager import DisplayOrderManager

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/v1/projects", tags=["projects"],
    dependencies=[Depends(require_user)],
)


async def get_project_or_404(project_id: UUID, db: AsyncSession) -> Project:
    project = await db.get(Project, project_id)
    if not project:
        raise ResourceNotFoundError("Project", str(project_id))
    return project


def _serialize(project: Project) -> dict:
    return dump(ProjectResponse.model_validate(project))


async def _list(db: AsyncSession, *conditions) -> list[dict]:
    query = select(Project).order_by(
        Project.display_order, Project.created_at,
    )
    for condition in conditions:
        query = query.where(condition)
    result = await db.execute(query)
    return [_serialize(p) for p in result.scalars().all()]


# ─── Collection ─────────────────────────────────────────────────

@router.get("")
async def list_projects(
    featured: bool | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    """All projects sorted by display order, optionally one partition only."""
    conditions = [] if featured is None else [Project.featured == featured]
    return envelope(await _list(db, *conditions))


@router.get("/featured")
async def list_featured(db: AsyncSession = Depends(get_db)):
    """Published featured projects in display order."""
    return envelope(await _list(
        db, Project.featured.is_(True),
        Project.status == ProjectStatus.PUBLISHED.value,
    ))


@router.get("/regular")
async def list_regular(db: AsyncSession = Depends(get_db)):
    """Published non-featured projects in display order."""
    return envelope(await _list(
        db, Project.featured.is_(False),
        Project.status == ProjectStatus.PUBLISHED.value,
    ))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_project(
    body: ProjectCreate, db: AsyncSession = Depends(get_db),
):
    """Create a project at the end of its partition."""
    project = Project(**body.to_columns(), featured=body.featured)
    await DisplayOrderManager(db).add_project(project)
    await db.commit()
    await db.refresh(project)
    logger.info(
        f"Created project at position {project.display_order}",
        extra={"project_id": str(project.id), "featured": project.featured},
    )
    return envelope(_serialize(project))


# ─── Ordering ───────────────────────────────────────────────────

@router.put("/reorder")
async def reorder_projects(
    body: ReorderRequest, db: AsyncSession = Depends(get_db),
):
    """Apply a full ordered id list to one partition, all-or-nothing."""
    result = await DisplayOrderManager(db).reorder_by_sequence(
        body.ids, body.featured,
    )
    return envelope(result)


@router.post("/rebalance")
async def rebalance_all(db: AsyncSession = Depends(get_db)):
    """Administrative repair: make both partitions dense again."""
    manager = DisplayOrderManager(db)
    await manager.rebalance(True)
    await manager.rebalance(False)
    await db.commit()
    return message("All projects rebalanced successfully")


# ─── Item ───────────────────────────────────────────────────────

@router.get("/{project_id}")
async def get_project(project_id: UUID, db: AsyncSession = Depends(get_db)):
    project = await get_project_or_404(project_id, db)
    return envelope(_serialize(project))


@router.put("/{project_id}")
async def update_project(
    project_id: UUID, body: ProjectUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Replace payload fields; a featured change moves the project across partitions."""
    project = await get_project_or_404(project_id, db)
    for column, value in body.to_columns().items():
        setattr(project, column, value)
    if body.featured is not None and body.featured != project.featured:
        await DisplayOrderManager(db).apply_feature_toggle(project, body.featured)
    await db.commit()
    await db.refresh(project)
    return envelope(_serialize(project))


@router.delete("/{project_id}")
async def delete_project(project_id: UUID, db: AsyncSession = Depends(get_db)):
    """Delete a project and close the gap in its partition."""
    project = await get_project_or_404(project_id, db)
    await DisplayOrderManager(db).remove_project(project)
    await db.commit()
    logger.info(
        "Deleted project",
        extra={"project_id": str(project_id), "featured": project.featured},
    )
    return message("Project deleted successfully")


@router.put("/{project_id}/toggle-featured")
async def toggle_featured(
    project_id: UUID, db: AsyncSession = Depends(get_db),
):
    """Flip featured; the project moves to the end of its new partition."""
    project = await get_project_or_404(project_id, db)
    await DisplayOrderManager(db).apply_feature_toggle(
        project, not project.featured,
    )
    await db.commit()
    await db.refresh(project)
    return envelope(_serialize(project))
