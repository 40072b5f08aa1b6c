"""
SQLAlchemy ORM models for the account store.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Index, String, Uuid, func
from sqlalchemy.orm import DeclarativeBase


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class User(Base):
    __tablename__ = "users"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    # Holds the escaped form, which can outgrow the 16-character input limit.
    username = Column(String(96), nullable=False)
    password_hash = Column(String(255), nullable=False)
    online = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)

    # Closes the check-then-insert race in registration.
    __table_args__ = (
        Index("ix_users_username_lower", func.lower(username), unique=True),
    )
