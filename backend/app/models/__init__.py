"""ORM Models — SQLAlchemy declarative models for all portfolio entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Project is the only entity with ordering state (display_order)

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all / autogenerate
"""

from app.models.user import User  # noqa: F401
from app.models.project import Project  # noqa: F401
from app.models.work_experience import WorkExperience  # noqa: F401
from app.models.profile import Profile  # noqa: F401
