"""Request Dependencies — authenticated caller resolution.

Invariants:
    - require_user returns a persisted User or raises AuthenticationError (401)
    - A valid token for a deleted user is rejected like an invalid token
"""

from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import AuthenticationError
from app.infrastructure.database import get_db
from app.infrastructure.security import decode_token
from app.models.user import User

bearer_scheme = HTTPBearer(auto_error=False)


async def require_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> User:
    """FastAPI dependency ensuring the request carries a valid Bearer token."""
    if credentials is None:
        raise AuthenticationError("Not authenticated")
    token = decode_token(credentials.credentials)
    try:
        user_id = UUID(token.sub)
    except ValueError:
        raise AuthenticationError("Invalid token")
    user = await db.get(User, user_id)
    if user is None:
        raise AuthenticationError("Not authorized")
    return user
