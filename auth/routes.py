"""
Auth API routes — register, login, logout, me.

Mounted at the application root.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime

from fastapi import APIRouter, Depends, Response
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from auth.cookies import clear_session_cookie, set_session_cookie
from auth.dependencies import (
    db_session,
    get_current_user_id,
    get_settings,
    get_token_signer,
)
from auth.exceptions import ConflictError, NotFoundError, UnauthorizedError
from auth.jwt import TokenSigner
from auth.password import hash_password, verify_password
from config.settings import Settings
from database.models import User

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])

INVALID_CREDENTIALS = "Invalid email or password"


# ── Request / response schemas ─────────────────────────────────────────


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RegisterRequest(BaseModel):
    name: str = Field(..., min_length=2)
    email: EmailStr
    password: str = Field(..., min_length=6)


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class RegisterResponse(_CamelModel):
    ok: bool = True
    user_id: str
    message: str


class LoginResponse(_CamelModel):
    ok: bool = True
    token: str
    user_id: str
    name: str
    email: str


class LogoutResponse(BaseModel):
    ok: bool = True
    message: str


class UserProfile(_CamelModel):
    id: str
    name: str
    email: str
    created_at: datetime


# ── Endpoints ──────────────────────────────────────────────────────────


@router.post("/register", response_model=RegisterResponse)
async def register(
    req: RegisterRequest,
    session: AsyncSession = Depends(db_session),
    settings: Settings = Depends(get_settings),
) -> RegisterResponse:
    """Register a new user."""
    result = await session.execute(
        select(User).where(User.email == req.email)
    )
    if result.scalar_one_or_none() is not None:
        logger.info("Registration rejected, email already used")
        raise ConflictError()

    user = User(
        id=str(uuid.uuid4()),
        name=req.name,
        email=req.email,
        password_hash=await run_in_threadpool(
            hash_password, req.password, rounds=settings.bcrypt_rounds
        ),
    )
    session.add(user)
    try:
        await session.commit()
    except IntegrityError:
        # Lost a concurrent registration race on the unique email index.
        await session.rollback()
        logger.info("Registration rejected by unique constraint")
        raise ConflictError()

    logger.info("Registered user %s (%s)", user.name, user.id)
    return RegisterResponse(user_id=user.id, message="Registration successful")


@router.post("/login", response_model=LoginResponse)
async def login(
    req: LoginRequest,
    response: Response,
    session: AsyncSession = Depends(db_session),
    settings: Settings = Depends(get_settings),
    signer: TokenSigner = Depends(get_token_signer),
) -> LoginResponse:
    """Login with email + password; sets the session cookie."""
    result = await session.execute(
        select(User).where(User.email == req.email)
    )
    user = result.scalar_one_or_none()

    if user is None or not await run_in_threadpool(
        verify_password, req.password, user.password_hash
    ):
        logger.info("Login failed")
        raise UnauthorizedError(INVALID_CREDENTIALS)

    token = signer.create_token(user.id)
    set_session_cookie(response, token, settings)
    logger.info("Login: %s (%s)", user.name, user.id)

    return LoginResponse(
        token=token,
        user_id=user.id,
        name=user.name,
        email=user.email,
    )


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    settings: Settings = Depends(get_settings),
) -> LogoutResponse:
    """
    Clear the session cookie.

    Tokens are stateless: one issued before logout stays valid as a
    bearer credential until it expires.
    """
    clear_session_cookie(response, settings)
    return LogoutResponse(message="Logged out successfully")


@router.get("/me", response_model=UserProfile)
async def me(
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
) -> UserProfile:
    """Return the authenticated user's profile."""
    user = await session.get(User, user_id)
    if user is None:
        raise NotFoundError()

    return UserProfile(
        id=user.id,
        name=user.name,
        email=user.email,
        created_at=user.created_at,
    )
