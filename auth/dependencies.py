"""
FastAPI dependencies for authentication.

Provides ``db_session`` and ``get_current_user_id`` dependencies that
are used across all protected routes.
"""

from __future__ import annotations

from typing import AsyncGenerator, Optional

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from auth.errors import Unauthenticated
from auth.jwt import verify_token
from database.session import get_db_session


async def db_session(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[AsyncSession, None]:
    """Yield a DB session for route handlers."""
    yield session


async def get_current_user_id(
    authorization: Optional[str] = Header(None, alias="Authorization"),
) -> int:
    """
    Extract and verify the Bearer token, returning the authenticated
    ``user_id``.
    """
    if not authorization:
        raise Unauthenticated()
    parts = authorization.split(" ")
    scheme = parts[0]
    token = parts[1] if len(parts) > 1 else ""
    if scheme.lower() != "bearer" or not token:
        raise Unauthenticated()
    return verify_token(token)
