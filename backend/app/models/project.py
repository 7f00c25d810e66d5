"""Project ORM — portfolio project with a per-partition display order.

Invariants:
    - featured is the partition key for display ordering
    - display_order is written ONLY by services/display_order_manager.py
    - Within each partition display_order is 1..N after every completed operation

Design Decisions:
    - No unique constraint on (featured, display_order): rebalance and reorder
      pass through transient duplicates before the flush completes
    - Composite index on (featured, display_order): every ordering query filters
      by partition and sorts by order
    - JSON column for technologies: list payload stored as-is
    - title is Text, not String(100): the 100-char limit applies to the input,
      and HTML escaping can grow it up to 6x before it is stored
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, Boolean, DateTime, JSON, Index
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from app.db.base import Base


class Project(Base):
    """Portfolio project entity."""
    __tablename__ = "projects"
    __table_args__ = (
        Index("ix_projects_featured_display_order", "featured", "display_order"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    image: Mapped[str] = mapped_column(String(2048), nullable=False)
    technologies: Mapped[list] = mapped_column(
        JSON, nullable=False, default=list,
    )
    github_url: Mapped[str] = mapped_column(String(2048), nullable=False)
    url: Mapped[str] = mapped_column(String(2048), nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="draft",
    )
    featured: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    display_order: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
