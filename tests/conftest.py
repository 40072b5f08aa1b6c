"""
Shared fixtures: an in-memory user store and pre-wired auth components.
"""

import uuid
from datetime import datetime, timezone
from typing import Dict, List, Optional

import pytest

from auth.models import UserRecord
from auth.password import hash_password
from auth.service import AuthService
from auth.strategies import BearerStrategy, LocalStrategy
from auth.tokens import TokenIssuer
from database.users import DuplicateUsernameError

SECRET = "test-secret-do-not-use-in-production"
FAST_ROUNDS = 4


class InMemoryUserStore:
    """Dict-backed stand-in for ``SqlUserStore``."""

    def __init__(self):
        self.users: Dict[str, UserRecord] = {}

    async def find_by_id(self, user_id: str) -> Optional[UserRecord]:
        return self.users.get(user_id)

    async def find_by_username(self, username: str) -> Optional[UserRecord]:
        for user in self.users.values():
            if user.username == username:
                return user
        return None

    async def username_exists(self, username: str) -> bool:
        return any(u.username.lower() == username.lower() for u in self.users.values())

    async def find_all(self) -> List[UserRecord]:
        return list(self.users.values())

    async def insert(self, username: str, password_hash: str) -> UserRecord:
        if await self.username_exists(username):
            raise DuplicateUsernameError(username)
        now = datetime.now(timezone.utc)
        user = UserRecord(
            id=str(uuid.uuid4()),
            username=username,
            password_hash=password_hash,
            created_at=now,
            updated_at=now,
        )
        self.users[user.id] = user
        return user

    def add(self, username: str, password: str) -> UserRecord:
        """Synchronously seed a user with a real bcrypt hash."""
        now = datetime.now(timezone.utc)
        user = UserRecord(
            id=str(uuid.uuid4()),
            username=username,
            password_hash=hash_password(password, rounds=FAST_ROUNDS),
            created_at=now,
            updated_at=now,
        )
        self.users[user.id] = user
        return user


@pytest.fixture
def store():
    return InMemoryUserStore()


@pytest.fixture
def issuer():
    return TokenIssuer(SECRET, expiry_seconds=3600)


@pytest.fixture
def bearer(issuer):
    return BearerStrategy(issuer)


@pytest.fixture
def service(store, issuer):
    return AuthService(
        store=store,
        local=LocalStrategy(store),
        issuer=issuer,
        bcrypt_rounds=FAST_ROUNDS,
    )
