"""
FastAPI dependencies (shared across routes).
"""

from __future__ import annotations

from typing import AsyncGenerator, Optional

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from auth.models import AuthClaims, UserStore
from auth.service import AuthService
from auth.strategies import LocalStrategy
from database.session import get_db_session
from database.users import SqlUserStore


async def db_session(session: AsyncSession = Depends(get_db_session)) -> AsyncGenerator[AsyncSession, None]:
    """Re-export so routes import from a single place."""
    yield session


async def get_user_store(session: AsyncSession = Depends(db_session)) -> UserStore:
    return SqlUserStore(session)


async def get_auth_service(
    request: Request,
    store: UserStore = Depends(get_user_store),
) -> AuthService:
    """Build a per-request ``AuthService`` around the process-wide token issuer."""
    settings = request.app.state.settings
    return AuthService(
        store=store,
        local=LocalStrategy(store),
        issuer=request.app.state.token_issuer,
        bcrypt_rounds=settings.bcrypt_rounds,
        generic_login_errors=settings.login_generic_errors,
    )


async def get_current_claims(
    request: Request,
    authorization: Optional[str] = Header(None, alias="Authorization"),
) -> AuthClaims:
    """
    Verify the Bearer token from the Authorization header.
    Returns the token's claims as the authenticated principal.
    """
    return request.app.state.bearer_strategy.authenticate(authorization)
