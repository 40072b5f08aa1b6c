"""
Errors raised by the auth pipeline.

Every ``AuthError`` knows its HTTP status and the JSON body it renders to, so
the API layer turns them into responses with a single exception handler.
"""

from __future__ import annotations

from typing import Any, Dict, List

from auth.models import FieldError


class AuthError(Exception):
    status_code = 500

    def to_payload(self) -> Dict[str, Any]:
        return {"error": str(self)}


class SignupRejected(AuthError):
    """Base for 403 signup rejections: echoes the username plus every problem."""

    status_code = 403

    def __init__(self, username: str, errors: List[FieldError]):
        super().__init__("; ".join(e.message for e in errors))
        self.username = username
        self.errors = errors

    def to_payload(self) -> Dict[str, Any]:
        return {
            "username": self.username,
            "errors": [e.model_dump() for e in self.errors],
        }


class ValidationFailure(SignupRejected):
    pass


class UsernameTaken(SignupRejected):
    def __init__(self, username: str):
        super().__init__(
            username, [FieldError(field="username", message="Username is taken")]
        )


class AuthenticationFailure(AuthError):
    status_code = 400
    message = "Login failed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)

    def to_payload(self) -> Dict[str, Any]:
        return {"message": str(self), "user": None, "err": None}


class UserNotFound(AuthenticationFailure):
    message = "User not found."


class IncorrectPassword(AuthenticationFailure):
    message = "Incorrect password."


class Unauthenticated(AuthError):
    status_code = 401


class UserLookupMiss(AuthError):
    status_code = 404

    def __init__(self):
        super().__init__("User not found")


class StoreFailure(AuthError):
    """Infrastructure failure. The message names the operation, never credentials."""


class HashingError(AuthError):
    pass


class SignerMisconfiguration(RuntimeError):
    """The token signer cannot be built. Fatal at startup."""
