"""Profile Schemas — profile with embedded education and certification records.

Invariants:
    - headline 1-150 chars, biography non-empty, skills non-empty
    - graduationYear / yearIssued are 4-9 chars (single year or a range)
    - profilePictureUrl optional; when present must be an absolute http(s) URL, stored as sent
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field, field_validator

from app.schemas.common import CamelModel, clean_url, require_text


class Education(CamelModel):
    degree: str = Field(min_length=1, max_length=100)
    institution: str = Field(min_length=1, max_length=150)
    graduation_year: str = Field(min_length=4, max_length=9)

    @field_validator("degree", "institution", "graduation_year")
    @classmethod
    def clean(cls, v: str) -> str:
        return require_text(v)


class Certification(CamelModel):
    certificate_name: str = Field(min_length=1, max_length=150)
    issuing_organization: str = Field(min_length=1, max_length=150)
    year_issued: str = Field(min_length=4, max_length=9)

    @field_validator("certificate_name", "issuing_organization", "year_issued")
    @classmethod
    def clean(cls, v: str) -> str:
        return require_text(v)


class ProfilePayload(CamelModel):
    profile_picture_url: str | None = None
    headline: str = Field(min_length=1, max_length=150)
    biography: str = Field(min_length=1)
    skills: list[str] = Field(min_length=1)
    education: list[Education] = Field(default_factory=list)
    certifications: list[Certification] = Field(default_factory=list)

    @field_validator("profile_picture_url")
    @classmethod
    def check_picture_url(cls, v: str | None) -> str | None:
        return clean_url(v) if v is not None else None

    @field_validator("headline", "biography")
    @classmethod
    def clean(cls, v: str) -> str:
        return require_text(v)

    @field_validator("skills")
    @classmethod
    def clean_skills(cls, v: list[str]) -> list[str]:
        try:
            return [require_text(skill) for skill in v]
        except ValueError:
            raise ValueError("Skill cannot be empty")

    def to_columns(self) -> dict:
        return {
            "profile_picture_url": self.profile_picture_url,
            "headline": self.headline,
            "biography": self.biography,
            "skills": self.skills,
            "education": [e.model_dump(by_alias=True) for e in self.education],
            "certifications": [
                c.model_dump(by_alias=True) for c in self.certifications
            ],
        }


class ProfileResponse(CamelModel):
    id: UUID
    profile_picture_url: str | None
    headline: str
    biography: str
    skills: list[str]
    education: list[dict]
    certifications: list[dict]
    created_at: datetime
    updated_at: datetime
