"""
Tests for bcrypt password hashing.
"""

from auth.password import hash_password, verify_password


class TestPasswordHashing:
    def test_hash_is_not_plaintext(self):
        hashed = hash_password("secret1", rounds=4)
        assert hashed != "secret1"
        assert hashed.startswith("$2b$04$")

    def test_verify_roundtrip(self):
        hashed = hash_password("secret1", rounds=4)
        assert verify_password("secret1", hashed) is True
        assert verify_password("secret2", hashed) is False

    def test_salted(self):
        assert hash_password("secret1", rounds=4) != hash_password("secret1", rounds=4)

    def test_default_cost_is_ten(self):
        assert hash_password("secret1").startswith("$2b$10$")

    def test_garbage_hash_does_not_verify(self):
        assert verify_password("secret1", "not-a-bcrypt-hash") is False
