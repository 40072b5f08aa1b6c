"""
AuthService — the two public account operations, ``register`` and ``login``.

register:  validate → uniqueness check → hash → insert
login:     local strategy → issue token

A taken username is reported on its own, ahead of any field errors, so a
client sees the same response whether or not the rest of the form was valid.
"""

from __future__ import annotations

import asyncio
import logging

from auth.exceptions import (
    AuthenticationFailure,
    StoreFailure,
    UsernameTaken,
    ValidationFailure,
)
from auth.models import LoginRequest, LoginResponse, SignupRequest, UserStore
from auth.password import DEFAULT_ROUNDS, hash_password
from auth.strategies import LocalStrategy
from auth.tokens import TokenIssuer
from auth.validation import sanitize, validate_signup
from database.users import DuplicateUsernameError, StoreError

logger = logging.getLogger(__name__)

SIGNUP_OK = "User created successfully!"
GENERIC_LOGIN_FAILURE = "Incorrect username or password."


class AuthService:
    def __init__(
        self,
        store: UserStore,
        local: LocalStrategy,
        issuer: TokenIssuer,
        bcrypt_rounds: int = DEFAULT_ROUNDS,
        generic_login_errors: bool = False,
    ):
        self.store = store
        self.local = local
        self.issuer = issuer
        self.bcrypt_rounds = bcrypt_rounds
        self.generic_login_errors = generic_login_errors

    async def register(self, form: SignupRequest) -> str:
        """Create an account. Returns the confirmation message."""
        username, errors = validate_signup(form)

        try:
            taken = await self.store.username_exists(username)
        except StoreError as exc:
            raise StoreFailure(f"Error while checking username: {exc}") from exc
        if taken:
            logger.info("Signup rejected: username %r is taken", username)
            raise UsernameTaken(username)

        if errors:
            raise ValidationFailure(username, errors)

        password_hash = await asyncio.to_thread(
            hash_password, form.password, self.bcrypt_rounds
        )

        try:
            user = await self.store.insert(username, password_hash)
        except DuplicateUsernameError as exc:
            logger.info("Signup lost insert race for username %r", username)
            raise UsernameTaken(username) from exc
        except StoreError as exc:
            raise StoreFailure(f"Error while creating user: {exc}") from exc

        logger.info("Registered user %s (%s)", user.username, user.id)
        return SIGNUP_OK

    async def login(self, form: LoginRequest) -> LoginResponse:
        """
        Check credentials and hand back the user with a fresh token.

        Usernames are stored sanitized, so the lookup key is sanitized too.
        """
        try:
            user = await self.local.authenticate(sanitize(form.username), form.password)
        except AuthenticationFailure as exc:
            logger.info("Login failed for %r: %s", form.username, exc)
            if self.generic_login_errors:
                raise AuthenticationFailure(GENERIC_LOGIN_FAILURE) from exc
            raise
        except StoreError as exc:
            raise StoreFailure(f"Error while fetching user by username: {exc}") from exc

        token = self.issuer.issue(user)
        logger.info("Login: %s (%s)", user.username, user.id)
        return LoginResponse(user=user, token=token)
