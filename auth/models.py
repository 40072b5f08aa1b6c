"""
Account data shapes shared by the auth pipeline, the store adapter and the
HTTP layer.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional, Protocol

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UserRecord(BaseModel):
    """A stored account. ``password_hash`` never leaves the model in a dump."""

    id: str
    username: str
    password_hash: str = Field("", exclude=True, repr=False)
    online: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class AuthClaims(BaseModel):
    """Identity facts carried inside a bearer token."""

    sub: str
    username: str
    iat: int
    exp: Optional[int] = None

    @property
    def user_id(self) -> str:
        return self.sub


class FieldError(BaseModel):
    field: str
    message: str


# ── Request / response schemas ─────────────────────────────────────────


def _form_text(value: Any) -> Any:
    """Read a null form field as empty and a number as its text."""
    if value is None:
        return ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


class SignupRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    username: str = ""
    password: str = ""
    confirm_password: str = Field("", alias="confirmPassword")

    @field_validator("username", "password", "confirm_password", mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> Any:
        return _form_text(value)


class LoginRequest(BaseModel):
    username: str = ""
    password: str = ""

    @field_validator("username", "password", mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> Any:
        return _form_text(value)


class LoginResponse(BaseModel):
    user: UserRecord
    token: str


class MessageResponse(BaseModel):
    message: str


# ── Store boundary ─────────────────────────────────────────────────────


class UserStore(Protocol):
    """Persistence operations the auth pipeline consumes."""

    async def find_by_id(self, user_id: str) -> Optional[UserRecord]: ...

    async def find_by_username(self, username: str) -> Optional[UserRecord]: ...

    async def username_exists(self, username: str) -> bool:
        """Case-insensitive exact match."""
        ...

    async def find_all(self) -> List[UserRecord]: ...

    async def insert(self, username: str, password_hash: str) -> UserRecord: ...
