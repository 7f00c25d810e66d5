"""Display Order Rules — pure computations behind the per-partition ordering contract.

Invariants:
    - Within a partition, display orders form exactly 1..N (density)
    - Functions here are PURE: they return assignments or error descriptors,
      the shell (services/display_order_manager.py) applies them
    - A reorder sequence must name every member of its partition exactly once

Design Decisions:
    - Validation returns a descriptor dict (or None) instead of raising, same as
      the other core validators; the shell decides which exception to raise
    - compute_rebalance skips unchanged rows so re-running on a dense partition
      produces no writes
"""

from collections.abc import Iterable, Sequence
from uuid import UUID

from app.core.domain_types import DisplayOrder


FIRST_DISPLAY_ORDER: DisplayOrder = DisplayOrder(1)


def next_display_order(current_max: int | None) -> DisplayOrder:
    """Slot appended to the end of a partition whose highest order is current_max."""
    if current_max is None or current_max < FIRST_DISPLAY_ORDER:
        return FIRST_DISPLAY_ORDER
    return DisplayOrder(current_max + 1)


def sequence_assignments(ordered_ids: Sequence[UUID]) -> list[tuple[UUID, DisplayOrder]]:
    """Position i in ordered_ids receives display order i + 1."""
    return [
        (project_id, DisplayOrder(position + 1))
        for position, project_id in enumerate(ordered_ids)
    ]


def compute_rebalance(
    scanned: Sequence[tuple[UUID, int]],
) -> dict[UUID, DisplayOrder]:
    """Dense reassignment for rows already sorted by (display_order, tie-breaker).

    Returns only the rows whose order changes. Gaps, duplicates and
    out-of-range values are all normalized by the same scan.
    """
    return {
        project_id: DisplayOrder(position + 1)
        for position, (project_id, old_order) in enumerate(scanned)
        if old_order != position + 1
    }


def is_dense(orders: Iterable[int]) -> bool:
    """True when orders are exactly 1..N with no gaps or duplicates."""
    values = sorted(orders)
    return values == list(range(1, len(values) + 1))


def validate_reorder_sequence(
    ordered_ids: Sequence[UUID], partition_ids: Iterable[UUID],
) -> dict | None:
    """Check a reorder request against the partition's current membership.

    Returns an error descriptor, or None when the sequence may be applied.
    """
    if not ordered_ids:
        return {
            "error_code": "EMPTY_SEQUENCE",
            "message": "ids must be a non-empty array of project IDs",
        }

    if len(set(ordered_ids)) != len(ordered_ids):
        return {
            "error_code": "DUPLICATE_IDS",
            "message": "ids must not contain duplicate project IDs",
        }

    members = set(partition_ids)
    foreign = [str(pid) for pid in ordered_ids if pid not in members]
    if foreign:
        return {
            "error_code": "FOREIGN_IDS",
            "message": (
                "Some provided project IDs are invalid or belong to a "
                f"different group: {', '.join(foreign)}"
            ),
            "foreign_ids": foreign,
        }

    if len(ordered_ids) != len(members):
        return {
            "error_code": "PARTIAL_SEQUENCE",
            "message": (
                f"ids must list every project in the group: got "
                f"{len(ordered_ids)}, group has {len(members)}"
            ),
        }

    return None
