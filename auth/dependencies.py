"""
FastAPI dependencies for authentication.

Provides ``db_session``, ``get_settings``, ``get_token_signer`` and the
session gate ``get_current_user_id`` used by protected routes.
"""

from __future__ import annotations

from typing import AsyncGenerator, Optional

from fastapi import Cookie, Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from auth.cookies import SESSION_COOKIE, unsign_cookie
from auth.exceptions import UnauthorizedError
from auth.jwt import TokenSigner
from config.settings import Settings
from database.session import get_db_session

_bearer_scheme = HTTPBearer(auto_error=False)


async def db_session(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[AsyncSession, None]:
    """Yield a DB session for route handlers."""
    yield session


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_token_signer(request: Request) -> TokenSigner:
    return request.app.state.token_signer


def resolve_session(
    bearer_token: Optional[str],
    signed_cookie: Optional[str],
    signer: TokenSigner,
    cookie_secret: str,
) -> Optional[str]:
    """
    Derive the authenticated user id from a bearer token or the signed
    session cookie.

    A bearer token, when present, is the only credential looked at.
    Anything missing, tampered with or expired yields ``None``.
    """
    if bearer_token:
        return signer.verify_token(bearer_token)
    if signed_cookie:
        token = unsign_cookie(signed_cookie, cookie_secret)
        if token is None:
            return None
        return signer.verify_token(token)
    return None


async def get_optional_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer_scheme),
    session_cookie: Optional[str] = Cookie(default=None, alias=SESSION_COOKIE),
    settings: Settings = Depends(get_settings),
    signer: TokenSigner = Depends(get_token_signer),
) -> Optional[str]:
    bearer_token = credentials.credentials if credentials else None
    return resolve_session(bearer_token, session_cookie, signer, settings.cookie_secret)


async def get_current_user_id(
    user_id: Optional[str] = Depends(get_optional_user_id),
) -> str:
    """Return the authenticated ``user_id`` or reject the request with 401."""
    if user_id is None:
        raise UnauthorizedError()
    return user_id
