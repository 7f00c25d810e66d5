"""Credentials — password hashing and JWT round trip.

Invariants:
    - Hashes verify only the original password
    - Expired, tampered, or malformed tokens raise AuthenticationError
"""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from app.config import get_settings
from app.core.errors import AuthenticationError
from app.infrastructure.security import (
    create_access_token, decode_token, hash_password, verify_password,
)


def test_hash_verifies_original_only():
    hashed = hash_password("correct-horse")

    assert hashed != "correct-horse"
    assert verify_password("correct-horse", hashed)
    assert not verify_password("wrong-horse", hashed)


def test_token_carries_subject_and_expiry():
    token = decode_token(create_access_token("user-1"))

    assert token.sub == "user-1"
    days = get_settings().jwt_expires_days
    assert token.exp - token.iat == int(timedelta(days=days).total_seconds())


def test_expired_token_rejected():
    settings = get_settings()
    past = datetime.now(timezone.utc) - timedelta(days=1)
    token = jwt.encode(
        {"sub": "user-1", "iat": int(past.timestamp()) - 60, "exp": int(past.timestamp())},
        settings.jwt_secret, algorithm=settings.jwt_algorithm,
    )

    with pytest.raises(AuthenticationError, match="expired"):
        decode_token(token)


def test_token_signed_with_other_secret_rejected():
    token = jwt.encode(
        {"sub": "user-1", "iat": 0, "exp": 4102444800},
        "another-secret-0123456789abcdef0123456789", algorithm="HS256",
    )

    with pytest.raises(AuthenticationError, match="Invalid token"):
        decode_token(token)


def test_garbage_token_rejected():
    with pytest.raises(AuthenticationError):
        decode_token("not.a.jwt")
