"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ProjectId, UserId wrap UUIDs — never use bare UUID in ordering logic
    - DisplayOrder is a positive integer, 1-based within a partition
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

ProjectId = NewType("ProjectId", UUID)
UserId = NewType("UserId", UUID)


# ─── Value Types ─────────────────────────────────────────────────

DisplayOrder = NewType("DisplayOrder", int)   # >= 1


# ─── Enums ───────────────────────────────────────────────────────

class ProjectStatus(str, Enum):
    """Project publication states — maps to DB `status` column."""
    DRAFT = "draft"
    PUBLISHED = "published"


class Partition(str, Enum):
    """The two display-order partitions, keyed by the `featured` flag."""
    FEATURED = "featured"
    REGULAR = "regular"

    @classmethod
    def of(cls, featured: bool) -> "Partition":
        return cls.FEATURED if featured else cls.REGULAR

    @property
    def featured(self) -> bool:
        return self is Partition.FEATURED
