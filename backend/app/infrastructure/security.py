"""Credentials — password hashing and JWT issue/verify.

Invariants:
    - Plain-text passwords never leave this module's callers unhashed
    - Tokens carry sub (user id), iat, exp; signed with settings.jwt_secret
    - decode_token raises AuthenticationError, never a PyJWT exception

Design Decisions:
    - passlib CryptContext with pbkdf2_sha256: pure-Python scheme, no native bcrypt build
    - deprecated="auto": hashes from retired schemes still verify and can be upgraded later
"""

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from passlib.context import CryptContext
from pydantic import BaseModel, ValidationError

from app.config import get_settings
from app.core.errors import AuthenticationError

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


class TokenData(BaseModel):
    """Decoded JWT payload."""
    sub: str
    iat: int
    exp: int


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(subject: str) -> str:
    """Create a signed JWT for the given user id."""
    settings = get_settings()
    now = datetime.now(timezone.utc)
    payload: dict[str, Any] = {
        "sub": subject,
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(days=settings.jwt_expires_days)).timestamp()),
    }
    return jwt.encode(
        payload, settings.jwt_secret, algorithm=settings.jwt_algorithm,
    )


def decode_token(token: str) -> TokenData:
    """Decode and validate a JWT, returning a typed payload."""
    settings = get_settings()
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm],
        )
        return TokenData(**payload)
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Token has expired")
    except (jwt.InvalidTokenError, ValidationError):
        raise AuthenticationError("Invalid token")
