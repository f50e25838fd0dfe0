"""
JWT session token creation and verification.

Tokens are HS256 JWTs carrying the user id as ``sub`` plus ``iat``/``exp``.
The signing key comes from ``Settings.jwt_secret`` (env var: ``JWT_SECRET``).
"""

from __future__ import annotations

import logging
import time
from typing import Optional

from jose import JWTError, jwt

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


class TokenSigner:
    """Issues and validates signed, time-limited session tokens."""

    def __init__(self, secret: str, expiry_seconds: int) -> None:
        self._secret = secret
        self._expiry_seconds = expiry_seconds

    def create_token(self, user_id: str) -> str:
        """Create a signed token containing ``user_id`` and expiry."""
        now = int(time.time())
        claims = {
            "sub": user_id,
            "iat": now,
            "exp": now + self._expiry_seconds,
        }
        return jwt.encode(claims, self._secret, algorithm=ALGORITHM)

    def verify_token(self, token: str) -> Optional[str]:
        """
        Verify token and return the ``sub`` claim.

        Returns ``None`` on a bad signature, malformed token, missing
        subject or expired token.
        """
        try:
            claims = jwt.decode(token, self._secret, algorithms=[ALGORITHM])
        except JWTError as exc:
            logger.debug("Token rejected: %s", exc)
            return None
        subject = claims.get("sub")
        if not isinstance(subject, str) or not subject:
            return None
        return subject
