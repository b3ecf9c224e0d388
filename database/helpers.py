"""
Database helper functions — credential and task store queries.

"""

from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import select, text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from database.models import Task, User

logger = logging.getLogger(__name__)


async def get_user_by_email(session: AsyncSession, email: str) -> Optional[User]:
    """Return the ``User`` with this email, or ``None``."""
    result = await session.execute(
        select(User).where(User.email == email)
    )
    return result.scalars().first()


async def create_user(
    session: AsyncSession,
    username: str,
    email: str,
    password_hash: str,
) -> User:
    """
    Insert a new ``User`` row and flush so the generated ``id`` is populated.

    Email uniqueness is not re-checked here; callers look the email up first
    and the unique constraint on ``users.email`` rejects concurrent duplicates.
    """
    user = User(username=username, email=email, password_hash=password_hash)
    session.add(user)
    await session.flush()
    return user


async def list_tasks_for_user(session: AsyncSession, user_id: int) -> List[Task]:
    """All tasks owned by ``user_id``, newest first."""
    result = await session.execute(
        select(Task)
        .where(Task.user_id == user_id)
        .order_by(Task.created_at.desc())
    )
    return list(result.scalars().all())


async def check_connection(engine: AsyncEngine) -> bool:
    """Run ``SELECT 1`` against the pool; log and return whether it worked."""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception:
        logger.exception("Database connection failed (%s)", engine.url.render_as_string(hide_password=True))
        return False
    logger.info("Database connection OK (%s)", engine.url.render_as_string(hide_password=True))
    return True
