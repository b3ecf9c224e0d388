"""
Shared fixtures: an in-memory credential/task store and a TestClient
wired to it.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from auth.dependencies import db_session
from config.settings import config
from database.models import Task, User


class InMemoryStore:
    """Stands in for ``database.helpers`` against plain lists."""

    def __init__(self) -> None:
        self.users: List[User] = []
        self.tasks: List[Task] = []

    async def get_user_by_email(self, session, email: str) -> Optional[User]:
        return next((u for u in self.users if u.email == email), None)

    async def create_user(self, session, username: str, email: str, password_hash: str) -> User:
        user = User(
            id=len(self.users) + 1,
            username=username,
            email=email,
            password_hash=password_hash,
        )
        self.users.append(user)
        return user

    async def list_tasks_for_user(self, session, user_id: int) -> List[Task]:
        owned = [t for t in self.tasks if t.user_id == user_id]
        return sorted(owned, key=lambda t: t.created_at, reverse=True)

    def add_task(self, user_id: int, title: str, created_at: datetime) -> Task:
        task = Task(
            id=len(self.tasks) + 1,
            user_id=user_id,
            title=title,
            created_at=created_at,
        )
        self.tasks.append(task)
        return task


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    monkeypatch.setattr(config, "bcrypt_rounds", 4)


@pytest.fixture
def fake_session():
    session = MagicMock()
    session.execute = AsyncMock(return_value=MagicMock())
    session.flush = AsyncMock()
    return session


@pytest.fixture
def store():
    store = InMemoryStore()
    with patch("auth.routes.get_user_by_email", side_effect=store.get_user_by_email), \
            patch("auth.routes.create_user", side_effect=store.create_user), \
            patch("api.routes.list_tasks_for_user", side_effect=store.list_tasks_for_user):
        yield store


@pytest.fixture
def client(fake_session):
    from main import app

    async def _override():
        yield fake_session

    app.dependency_overrides[db_session] = _override
    # no context manager: startup would try to reach a real database
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()
