"""Project Schemas — payload validation for project CRUD, reorder and toggle.

Invariants:
    - title 1-100 chars, description non-empty, both stripped and escaped
    - image, githubUrl, url must be absolute http(s) URLs, stored as sent (trimmed)
    - technologies is a non-empty list of non-empty strings
    - displayOrder is output-only: no request schema accepts it

Design Decisions:
    - featured optional on update: None means "leave partition unchanged"
    - ReorderRequest.featured is StrictBool: "true"/1 are rejected, not coerced
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field, StrictBool, field_validator

from app.core.domain_types import ProjectStatus
from app.schemas.common import CamelModel, clean_url, require_text


class ProjectPayload(CamelModel):
    """Fields shared by create and update."""
    title: str = Field(min_length=1, max_length=100)
    description: str = Field(min_length=1)
    image: str
    technologies: list[str] = Field(min_length=1)
    github_url: str
    url: str
    status: ProjectStatus = ProjectStatus.DRAFT

    @field_validator("title", "description")
    @classmethod
    def clean(cls, v: str) -> str:
        return require_text(v)

    @field_validator("image", "github_url", "url")
    @classmethod
    def check_url(cls, v: str) -> str:
        return clean_url(v)

    @field_validator("technologies")
    @classmethod
    def clean_technologies(cls, v: list[str]) -> list[str]:
        cleaned = [t.strip() for t in v]
        if any(not t for t in cleaned):
            raise ValueError("Technology cannot be empty")
        return cleaned

    def to_columns(self) -> dict:
        """Column values for the Project model."""
        return {
            "title": self.title,
            "description": self.description,
            "image": self.image,
            "technologies": self.technologies,
            "github_url": self.github_url,
            "url": self.url,
            "status": self.status.value,
        }


class ProjectCreate(ProjectPayload):
    featured: bool = False


class ProjectUpdate(ProjectPayload):
    featured: bool | None = None


class ProjectResponse(CamelModel):
    id: UUID
    title: str
    description: str
    image: str
    technologies: list[str]
    github_url: str
    url: str
    status: str
    featured: bool
    display_order: int
    created_at: datetime
    updated_at: datetime


class ReorderRequest(CamelModel):
    """Full ordered membership of one partition."""
    ids: list[UUID] = Field(min_length=1)
    featured: StrictBool
