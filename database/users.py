"""
SQL-backed user store.

Wraps an ``AsyncSession`` and exposes the lookups and the insert the auth
pipeline needs. Driver errors are re-raised as ``StoreError`` whose message
names the failing operation and the error type only; driver messages can
echo bound parameters (password hashes included), so they stay in the logs.
"""

from __future__ import annotations

import logging
import uuid
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from auth.models import UserRecord
from database.models import User

logger = logging.getLogger(__name__)


class StoreError(Exception):
    pass


class DuplicateUsernameError(StoreError):
    pass


def _to_uuid(value: str) -> Optional[uuid.UUID]:
    try:
        return uuid.UUID(value)
    except (ValueError, AttributeError, TypeError):
        return None


def _to_record(user: User) -> UserRecord:
    return UserRecord(
        id=str(user.id),
        username=user.username,
        password_hash=user.password_hash,
        online=bool(user.online),
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


def _store_error(operation: str, exc: Exception) -> StoreError:
    logger.exception("User store: %s failed", operation)
    return StoreError(f"{operation} failed ({type(exc).__name__})")


class SqlUserStore:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_id(self, user_id: str) -> Optional[UserRecord]:
        uid = _to_uuid(user_id)
        if uid is None:
            return None
        try:
            user = await self.session.get(User, uid)
        except SQLAlchemyError as exc:
            raise _store_error("find_by_id", exc) from exc
        return _to_record(user) if user is not None else None

    async def find_by_username(self, username: str) -> Optional[UserRecord]:
        """Exact, case-sensitive match."""
        try:
            result = await self.session.execute(
                select(User).where(User.username == username)
            )
            user = result.scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise _store_error("find_by_username", exc) from exc
        return _to_record(user) if user is not None else None

    async def username_exists(self, username: str) -> bool:
        try:
            result = await self.session.execute(
                select(User.id)
                .where(func.lower(User.username) == username.lower())
                .limit(1)
            )
            return result.scalar_one_or_none() is not None
        except SQLAlchemyError as exc:
            raise _store_error("username_exists", exc) from exc

    async def find_all(self) -> List[UserRecord]:
        try:
            result = await self.session.execute(
                select(User).order_by(User.created_at, User.id)
            )
            users = result.scalars().all()
        except SQLAlchemyError as exc:
            raise _store_error("find_all", exc) from exc
        return [_to_record(u) for u in users]

    async def insert(self, username: str, password_hash: str) -> UserRecord:
        user = User(id=uuid.uuid4(), username=username, password_hash=password_hash, online=False)
        self.session.add(user)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            await self.session.rollback()
            raise DuplicateUsernameError(f"username {username!r} already exists") from exc
        except SQLAlchemyError as exc:
            await self.session.rollback()
            raise _store_error("insert", exc) from exc
        return _to_record(user)
