"""
Bearer token issuance and verification.

Tokens are HS256 JWTs carrying the user's id (``sub``) and ``username``.
The signing secret comes from ``config.jwt_secret`` (env var: ``JWT_SECRET``)
and is checked once, when the issuer is built at startup.
"""

from __future__ import annotations

import time
from typing import Optional

import jwt as pyjwt

from auth.exceptions import SignerMisconfiguration, Unauthenticated
from auth.models import AuthClaims, UserRecord


class TokenIssuer:
    def __init__(
        self,
        secret: str,
        expiry_seconds: Optional[int] = None,
        algorithm: str = "HS256",
    ):
        if not secret:
            raise SignerMisconfiguration("JWT_SECRET is not set; refusing to issue unverifiable tokens")
        if expiry_seconds is not None and expiry_seconds <= 0:
            raise SignerMisconfiguration("Token expiry must be positive (use None to disable expiry)")
        self._secret = secret
        self._algorithm = algorithm
        self.expiry_seconds = expiry_seconds

    def __repr__(self) -> str:
        return f"TokenIssuer(algorithm={self._algorithm!r}, expiry_seconds={self.expiry_seconds!r})"

    def issue(self, user: UserRecord) -> str:
        """Create a signed token embedding ``user``'s identity claims."""
        now = int(time.time())
        claims = AuthClaims(
            sub=user.id,
            username=user.username,
            iat=now,
            exp=now + self.expiry_seconds if self.expiry_seconds else None,
        )
        return pyjwt.encode(
            claims.model_dump(exclude_none=True), self._secret, algorithm=self._algorithm
        )

    def decode(self, token: str) -> AuthClaims:
        """
        Verify a token's signature (and expiry, when present).

        Raises ``Unauthenticated`` for anything that does not verify.
        """
        try:
            payload = pyjwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "iat"]},
            )
        except pyjwt.ExpiredSignatureError as exc:
            raise Unauthenticated("Token has expired") from exc
        except pyjwt.InvalidTokenError as exc:
            raise Unauthenticated("Invalid token") from exc

        if "username" not in payload:
            raise Unauthenticated("Invalid token")
        return AuthClaims(
            sub=str(payload["sub"]),
            username=payload["username"],
            iat=payload["iat"],
            exp=payload.get("exp"),
        )
