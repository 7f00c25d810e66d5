"""Auth Schemas — register/login payloads and the token response."""

from uuid import UUID

from pydantic import EmailStr, Field, field_validator

from app.schemas.common import CamelModel, clean_text


def _normalize_email(v: str) -> str:
    return v.strip().lower()


class RegisterRequest(CamelModel):
    name: str = Field(min_length=2, max_length=50)
    email: EmailStr
    password: str = Field(min_length=6, max_length=128)

    @field_validator("name")
    @classmethod
    def clean_name(cls, v: str) -> str:
        return clean_text(v)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return _normalize_email(v)


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(min_length=6, max_length=128)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return _normalize_email(v)


class UserResponse(CamelModel):
    id: UUID
    name: str
    email: str


class AuthResponse(UserResponse):
    token: str
