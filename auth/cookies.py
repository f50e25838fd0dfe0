"""
Signed ``session`` cookie helpers.

The cookie value is ``<token>.<signature>`` where the signature is an
HMAC-SHA256 of the token keyed by ``Settings.cookie_secret``.
"""

from __future__ import annotations

import hashlib
import hmac
from base64 import urlsafe_b64encode
from typing import Optional

from fastapi import Response

from config.settings import Settings

SESSION_COOKIE = "session"


def _signature(value: str, secret: str) -> str:
    digest = hmac.new(secret.encode(), value.encode(), hashlib.sha256).digest()
    return urlsafe_b64encode(digest).decode().rstrip("=")


def sign_cookie(value: str, secret: str) -> str:
    return value + "." + _signature(value, secret)


def unsign_cookie(signed: str, secret: str) -> Optional[str]:
    """Return the original value, or ``None`` if the signature does not match."""
    value, sep, sig = signed.rpartition(".")
    if not sep or not value:
        return None
    if not hmac.compare_digest(sig, _signature(value, secret)):
        return None
    return value


def _cookie_attributes(settings: Settings) -> dict:
    # Production frontends are cross-origin over https, localhost is plain http.
    if settings.is_production:
        return {"secure": True, "samesite": "none"}
    return {"secure": False, "samesite": "lax"}


def set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    response.set_cookie(
        key=SESSION_COOKIE,
        value=sign_cookie(token, settings.cookie_secret),
        max_age=settings.jwt_expiry_seconds,
        path="/",
        httponly=True,
        **_cookie_attributes(settings),
    )


def clear_session_cookie(response: Response, settings: Settings) -> None:
    response.delete_cookie(
        key=SESSION_COOKIE,
        path="/",
        httponly=True,
        **_cookie_attributes(settings),
    )
