"""Auth Routes — single-owner registration, login, and current user.

Invariants:
    - Only settings.admin_email may register (403 otherwise)
    - Login failures are indistinguishable: unknown email and wrong password both 401
    - Password hashes never appear in responses
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import require_user
from app.config import get_settings
from app.core.errors import (
    AuthenticationError, ConflictError, RegistrationClosedError,
)
from app.infrastructure.database import get_db
from app.infrastructure.security import (
    create_access_token, hash_password, verify_password,
)
from app.models.user import User
from app.schemas.auth import (
    AuthResponse, LoginRequest, RegisterRequest, UserResponse,
)
from app.schemas.common import dump, envelope

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


def _auth_payload(user: User) -> dict:
    return dump(AuthResponse(
        id=user.id, name=user.name, email=user.email,
        token=create_access_token(str(user.id)),
    ))


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(body: RegisterRequest, db: AsyncSession = Depends(get_db)):
    """Create the portfolio owner account."""
    if body.email != get_settings().admin_email:
        raise RegistrationClosedError()

    result = await db.execute(select(User).where(User.email == body.email))
    if result.scalar_one_or_none():
        raise ConflictError("User already exists")

    user = User(
        name=body.name, email=body.email,
        password_hash=hash_password(body.password),
    )
    db.add(user)
    await db.commit()
    await db.refresh(user)
    logger.info("Registered portfolio owner", extra={"user_id": str(user.id)})
    return envelope(_auth_payload(user))


@router.post("/login")
async def login(body: LoginRequest, db: AsyncSession = Depends(get_db)):
    """Exchange email + password for a bearer token."""
    result = await db.execute(select(User).where(User.email == body.email))
    user = result.scalar_one_or_none()
    if not user or not verify_password(body.password, user.password_hash):
        raise AuthenticationError("Invalid credentials")
    return envelope(_auth_payload(user))


@router.get("/me")
async def current_user(user: User = Depends(require_user)):
    return envelope(dump(UserResponse.model_validate(user)))
