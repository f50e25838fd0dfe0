"""
Tests for JWT session tokens and the signed session cookie.
"""

import time

from jose import jwt

from auth.cookies import sign_cookie, unsign_cookie
from auth.jwt import ALGORITHM, TokenSigner


class TestTokenSigner:
    def setup_method(self):
        self.signer = TokenSigner("test-secret", 604800)

    def test_roundtrip_subject(self):
        token = self.signer.create_token("user-1")
        assert self.signer.verify_token(token) == "user-1"

    def test_expiry_is_seven_days(self):
        token = self.signer.create_token("user-1")
        claims = jwt.get_unverified_claims(token)
        assert claims["exp"] - claims["iat"] == 7 * 24 * 60 * 60

    def test_wrong_secret_rejected(self):
        token = TokenSigner("other-secret", 604800).create_token("user-1")
        assert self.signer.verify_token(token) is None

    def test_expired_token_rejected(self):
        past = int(time.time()) - 8 * 24 * 60 * 60
        token = jwt.encode(
            {"sub": "user-1", "iat": past, "exp": past + 604800},
            "test-secret",
            algorithm=ALGORITHM,
        )
        assert self.signer.verify_token(token) is None

    def test_garbage_rejected(self):
        assert self.signer.verify_token("not.a.token") is None
        assert self.signer.verify_token("") is None

    def test_missing_subject_rejected(self):
        token = jwt.encode(
            {"exp": int(time.time()) + 60}, "test-secret", algorithm=ALGORITHM
        )
        assert self.signer.verify_token(token) is None


class TestSignedCookie:
    def test_unsign_returns_value(self):
        signed = sign_cookie("a.b.c", "cookie-secret")
        assert signed.startswith("a.b.c.")
        assert unsign_cookie(signed, "cookie-secret") == "a.b.c"

    def test_tampered_value_rejected(self):
        signed = sign_cookie("a.b.c", "cookie-secret")
        assert unsign_cookie("x" + signed, "cookie-secret") is None

    def test_wrong_secret_rejected(self):
        signed = sign_cookie("a.b.c", "cookie-secret")
        assert unsign_cookie(signed, "other-secret") is None

    def test_unsigned_value_rejected(self):
        assert unsign_cookie("nodot", "cookie-secret") is None
        assert unsign_cookie(".sig", "cookie-secret") is None
