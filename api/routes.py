"""
Task listing and liveness routes.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from auth.dependencies import db_session, get_current_user_id
from database.helpers import list_tasks_for_user

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_class=PlainTextResponse, tags=["health"])
async def liveness() -> str:
    return "Hello! Server is running!"


@router.get("/tasks", tags=["tasks"])
async def list_tasks(
    user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
) -> List[Dict[str, Any]]:
    """Return the caller's tasks, newest first."""
    tasks = await list_tasks_for_user(session, user_id)
    logger.debug("Listed %d tasks for user %s", len(tasks), user_id)
    return [task.to_dict() for task in tasks]
