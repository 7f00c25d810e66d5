"""Display Order Manager — applies the core ordering rules to the projects table.

Invariants:
    - The only writer of Project.display_order in the codebase
    - Every write is scoped to one partition (featured flag); the other partition is never touched
    - reorder_by_sequence is all-or-nothing: commit on success, rollback on any write failure
    - assign/rebalance only flush; the caller commits (one request = one unit of work)

Design Decisions:
    - Explicit pipeline steps instead of ORM lifecycle events: routes call
      add_project / remove_project / apply_feature_toggle at defined points,
      so the ordering contract is testable without the HTTP layer
    - Per-record UPDATE by id (_write_order): every order write goes through it
    - No partition lock: concurrent same-partition requests can interleave
      their read-then-write steps (accepted lost-update risk)
"""

import logging
from collections.abc import Sequence
from uuid import UUID

from sqlalchemy import select, update, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.display_order import (
    compute_rebalance,
    is_dense,
    next_display_order,
    sequence_assignments,
    validate_reorder_sequence,
)
from app.core.domain_types import DisplayOrder, Partition
from app.core.errors import (
    ErrorContext, ReorderValidationError, TransactionAbortedError,
)
from app.models.project import Project

logger = logging.getLogger(__name__)

REORDER_SUCCESS_MESSAGE = "Display order successfully updated."


class DisplayOrderManager:
    """Owns the dense 1..N display order of each featured partition."""

    def __init__(self, db: AsyncSession):
        self.db = db

    # ─── Assignment ─────────────────────────────────────────────

    async def assign_on_create(self, featured: bool) -> DisplayOrder:
        """Next free slot at the end of the partition a new project joins."""
        return await self._next_slot(featured)

    async def assign_on_feature_toggle(
        self, project: Project, featured: bool,
    ) -> DisplayOrder:
        """Move project to the end of the partition it is entering.

        Leaves a hole in the partition it left; see apply_feature_toggle.
        """
        order = await self._next_slot(featured, exclude=project.id)
        project.featured = featured
        await self._write_order(project.id, order)
        await self.db.flush()
        return order

    async def _next_slot(
        self, featured: bool, exclude: UUID | None = None,
    ) -> DisplayOrder:
        query = select(func.max(Project.display_order)).where(
            Project.featured == featured,
        )
        if exclude is not None:
            query = query.where(Project.id != exclude)
        result = await self.db.execute(query)
        return next_display_order(result.scalar())

    # ─── Rebalance ──────────────────────────────────────────────

    async def rebalance(self, featured: bool) -> bool:
        """Rewrite the partition to 1..N, keeping its current relative order."""
        result = await self.db.execute(
            select(Project.id, Project.display_order)
            .where(Project.featured == featured)
            .order_by(
                Project.display_order, Project.created_at, Project.id,
            ),
        )
        scanned = [(row.id, row.display_order) for row in result]
        if is_dense(order for _, order in scanned):
            logger.debug(
                f"{Partition.of(featured).value} partition already dense",
                extra={"featured": featured},
            )
            return True
        changes = compute_rebalance(scanned)
        for project_id, order in changes.items():
            await self._write_order(project_id, order)
        await self.db.flush()
        logger.info(
            f"Rebalanced {Partition.of(featured).value} partition: "
            f"{len(changes)}/{len(scanned)} project(s) moved",
            extra={"featured": featured},
        )
        return True

    async def delete_cleanup(self, deleted: Project) -> bool:
        """Close the gap a deleted project left in its former partition."""
        return await self.rebalance(deleted.featured)

    # ─── Reorder ────────────────────────────────────────────────

    async def reorder_by_sequence(
        self, ordered_ids: Sequence[UUID], featured: bool,
    ) -> dict:
        """Assign order i + 1 to ordered_ids[i], atomically.

        The sequence must list every member of the partition exactly once;
        anything else is rejected before the first write.
        """
        result = await self.db.execute(
            select(Project.id).where(Project.featured == featured),
        )
        members = list(result.scalars().all())
        error = validate_reorder_sequence(ordered_ids, members)
        if error:
            logger.warning(
                f"Reorder rejected ({error['error_code']}): {error['message']}",
                extra={"featured": featured, "error_code": error["error_code"]},
            )
            raise ReorderValidationError(
                error["message"], ErrorContext(featured=featured),
            )

        try:
            for project_id, order in sequence_assignments(ordered_ids):
                await self._write_order(project_id, order)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                f"Reorder aborted and rolled back: {e}",
                extra={"featured": featured, "error_code": "TRANSACTION_ABORTED"},
            )
            raise TransactionAbortedError(
                "display order update failed; no changes were applied",
                ErrorContext(featured=featured),
            ) from e

        logger.info(
            f"Reordered {len(ordered_ids)} project(s) in "
            f"{Partition.of(featured).value} partition",
            extra={"featured": featured},
        )
        return {"success": True, "message": REORDER_SUCCESS_MESSAGE}

    # ─── CRUD pipeline steps ────────────────────────────────────

    async def add_project(self, project: Project) -> Project:
        """Append a new project to its partition and stage it for insert."""
        project.display_order = await self.assign_on_create(bool(project.featured))
        self.db.add(project)
        await self.db.flush()
        return project

    async def remove_project(self, project: Project) -> None:
        """Delete project, then rebalance the partition it belonged to."""
        await self.db.delete(project)
        await self.db.flush()
        await self.delete_cleanup(project)

    async def apply_feature_toggle(self, project: Project, featured: bool) -> None:
        """Move project across partitions and leave both partitions dense."""
        if project.featured == featured:
            return
        previous = project.featured
        await self.assign_on_feature_toggle(project, featured)
        await self.rebalance(previous)
        await self.rebalance(featured)

    async def _write_order(self, project_id: UUID, order: int) -> None:
        await self.db.execute(
            update(Project)
            .where(Project.id == project_id)
            .values(display_order=order),
        )
