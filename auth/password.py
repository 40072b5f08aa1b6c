"""
Password hashing and verification.

Uses bcrypt for password hashing with automatic
salting and configurable work factor.
"""

from __future__ import annotations

import bcrypt

from auth.exceptions import HashingError

DEFAULT_ROUNDS = 10

# bcrypt reads at most 72 bytes of input; longer passwords are truncated.
BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode()[:BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """Hash a password with bcrypt (auto-salted, work factor ``rounds``)."""
    try:
        return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=rounds)).decode()
    except (ValueError, TypeError) as exc:
        raise HashingError(f"Password hashing failed: {type(exc).__name__}") from exc


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time comparison against a bcrypt hash."""
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode())
    except (ValueError, TypeError):
        return False
