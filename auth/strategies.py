"""
Authentication strategies.

``LocalStrategy`` checks a username/password pair against the store;
``BearerStrategy`` verifies the token carried in an ``Authorization`` header.
Both are built explicitly and handed to whatever needs them.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from auth.exceptions import IncorrectPassword, Unauthenticated, UserNotFound
from auth.models import AuthClaims, UserRecord, UserStore
from auth.password import verify_password
from auth.tokens import TokenIssuer

logger = logging.getLogger(__name__)

BEARER_SCHEME = "bearer"


class LocalStrategy:
    def __init__(self, store: UserStore):
        self.store = store

    async def authenticate(self, username: str, password: str) -> UserRecord:
        """Return the matching user, or raise ``UserNotFound`` / ``IncorrectPassword``."""
        user = await self.store.find_by_username(username)
        if user is None:
            raise UserNotFound()

        match = await asyncio.to_thread(verify_password, password, user.password_hash)
        if not match:
            raise IncorrectPassword()
        return user


def extract_bearer_token(authorization: Optional[str]) -> str:
    """Pull the token out of an ``Authorization: Bearer <token>`` header value."""
    if not authorization:
        raise Unauthenticated("Missing Bearer token")
    scheme, _, token = authorization.strip().partition(" ")
    token = token.strip()
    if scheme.lower() != BEARER_SCHEME or not token or " " in token:
        raise Unauthenticated("Missing Bearer token")
    return token


class BearerStrategy:
    def __init__(self, issuer: TokenIssuer):
        self.issuer = issuer

    def authenticate(self, authorization: Optional[str]) -> AuthClaims:
        """Return the claims of a valid bearer token, else raise ``Unauthenticated``."""
        claims = self.issuer.decode(extract_bearer_token(authorization))
        logger.debug("Bearer token accepted for %s", claims.sub)
        return claims
