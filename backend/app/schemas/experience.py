"""Work Experience Schemas.

Invariants:
    - jobTitle, companyName 1-150 chars; startDate required; endDate defaults to "Present"
    - description holds at least one non-empty bullet
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field, field_validator

from app.schemas.common import CamelModel, clean_text, require_text


class ExperiencePayload(CamelModel):
    job_title: str = Field(min_length=1, max_length=150)
    company_name: str = Field(min_length=1, max_length=150)
    start_date: str = Field(min_length=1, max_length=50)
    end_date: str = Field("Present", max_length=50)
    is_current: bool = False
    description: list[str] = Field(min_length=1)

    @field_validator("job_title", "company_name", "start_date")
    @classmethod
    def clean(cls, v: str) -> str:
        return require_text(v)

    @field_validator("end_date")
    @classmethod
    def clean_end_date(cls, v: str) -> str:
        return clean_text(v) or "Present"

    @field_validator("description")
    @classmethod
    def clean_bullets(cls, v: list[str]) -> list[str]:
        try:
            return [require_text(bullet) for bullet in v]
        except ValueError:
            raise ValueError("Description cannot be empty")


class ExperienceResponse(CamelModel):
    id: UUID
    job_title: str
    company_name: str
    start_date: str
    end_date: str
    is_current: bool
    description: list[str]
    created_at: datetime
    updated_at: datetime
