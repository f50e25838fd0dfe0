"""
Tests for resolving the authenticated user from bearer token / cookie.
"""

import time

from jose import jwt

from auth.cookies import sign_cookie
from auth.dependencies import resolve_session
from auth.jwt import ALGORITHM, TokenSigner

COOKIE_SECRET = "cookie-secret"


class TestResolveSession:
    def setup_method(self):
        self.signer = TokenSigner("jwt-secret", 604800)

    def _resolve(self, bearer=None, cookie=None):
        return resolve_session(bearer, cookie, self.signer, COOKIE_SECRET)

    def test_nothing_presented(self):
        assert self._resolve() is None

    def test_bearer_and_cookie_resolve_same_subject(self):
        token = self.signer.create_token("user-1")
        assert self._resolve(bearer=token) == "user-1"
        assert self._resolve(cookie=sign_cookie(token, COOKIE_SECRET)) == "user-1"

    def test_bearer_takes_precedence(self):
        bearer = self.signer.create_token("user-1")
        cookie = sign_cookie(self.signer.create_token("user-2"), COOKIE_SECRET)
        assert self._resolve(bearer=bearer, cookie=cookie) == "user-1"

    def test_invalid_bearer_does_not_fall_back_to_cookie(self):
        cookie = sign_cookie(self.signer.create_token("user-2"), COOKIE_SECRET)
        assert self._resolve(bearer="garbage", cookie=cookie) is None

    def test_unsigned_cookie_rejected(self):
        token = self.signer.create_token("user-1")
        assert self._resolve(cookie=token) is None

    def test_expired_token_is_unauthenticated(self):
        past = int(time.time()) - 8 * 24 * 60 * 60
        expired = jwt.encode(
            {"sub": "user-1", "iat": past, "exp": past + 604800},
            "jwt-secret",
            algorithm=ALGORITHM,
        )
        assert self._resolve(bearer=expired) is None
        assert self._resolve(cookie=sign_cookie(expired, COOKIE_SECRET)) is None
