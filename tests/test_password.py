"""
Tests for bcrypt password hashing.
"""

import pytest

from auth.exceptions import HashingError
from auth.password import hash_password, verify_password


class TestPasswordHashing:
    def test_hash_is_not_plaintext(self):
        hashed = hash_password("testpassword", rounds=4)
        assert hashed != "testpassword"
        assert hashed.startswith("$2")

    def test_hash_is_salted(self):
        assert hash_password("testpassword", rounds=4) != hash_password("testpassword", rounds=4)

    def test_work_factor_is_encoded(self):
        assert hash_password("testpassword", rounds=5).startswith("$2b$05$")

    def test_default_work_factor_is_ten(self):
        assert hash_password("testpassword").startswith("$2b$10$")

    @pytest.mark.parametrize("password", ["testpassword", "p@ss&w<rd>", "ünïcödé-pw"])
    def test_verify_matching_password(self, password):
        assert verify_password(password, hash_password(password, rounds=4)) is True

    def test_verify_other_password(self):
        hashed = hash_password("testpassword", rounds=4)
        assert verify_password("testpassword2", hashed) is False

    @pytest.mark.parametrize("bad_hash", ["", "not-a-hash", "$2b$04$short"])
    def test_verify_malformed_hash_returns_false(self, bad_hash):
        assert verify_password("testpassword", bad_hash) is False

    def test_invalid_rounds_raise_hashing_error(self):
        with pytest.raises(HashingError):
            hash_password("testpassword", rounds=1)

    def test_password_longer_than_72_bytes(self):
        password = "a" * 80
        hashed = hash_password(password, rounds=4)
        assert verify_password(password, hashed) is True

    def test_only_first_72_bytes_are_significant(self):
        hashed = hash_password("a" * 72 + "tail-one", rounds=4)
        assert verify_password("a" * 72 + "tail-two", hashed) is True
        assert verify_password("a" * 71, hashed) is False

    def test_multibyte_password_over_limit(self):
        password = "ü" * 50
        assert verify_password(password, hash_password(password, rounds=4)) is True
