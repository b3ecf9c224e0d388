"""
Auth API routes — register, login.

Mounted at the application root.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from auth.dependencies import db_session
from auth.errors import DuplicateEmail, InvalidCredential, UnknownUser
from auth.jwt import create_token
from auth.password import hash_password, verify_password
from database.helpers import create_user, get_user_by_email

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


# ── Request / response schemas ─────────────────────────────────────────


class RegisterRequest(BaseModel):
    username: str
    email: str
    password: str


class LoginRequest(BaseModel):
    email: str
    password: str


class PublicUser(BaseModel):
    id: int
    username: str
    email: str


class RegisterResponse(BaseModel):
    message: str
    user: PublicUser


class LoginResponse(BaseModel):
    message: str
    token: str


# ── Endpoints ──────────────────────────────────────────────────────────


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    req: RegisterRequest,
    session: AsyncSession = Depends(db_session),
) -> Dict[str, Any]:
    """Register a new user."""
    if await get_user_by_email(session, req.email) is not None:
        logger.info("Registration refused, email already in use: %s", req.email)
        raise DuplicateEmail()

    user = await create_user(
        session,
        username=req.username,
        email=req.email,
        password_hash=hash_password(req.password),
    )
    logger.info("Registered user %s (%s)", user.username, user.id)

    return {"message": "Registration successful", "user": user.to_public_dict()}


@router.post("/login", response_model=LoginResponse)
async def login(
    req: LoginRequest,
    session: AsyncSession = Depends(db_session),
) -> Dict[str, Any]:
    """Login with email + password."""
    user = await get_user_by_email(session, req.email)
    if user is None:
        logger.info("Login failed, unknown email: %s", req.email)
        raise UnknownUser()

    if not verify_password(req.password, user.password_hash):
        logger.info("Login failed, bad password for user %s", user.id)
        raise InvalidCredential()

    token = create_token(user.id)
    logger.info("Login: %s (%s)", user.username, user.id)

    return {"message": "Login successful", "token": token}
