"""
Authentication routes — signup, login, and the bearer-protected ``/me``.

Failures are raised as ``AuthError`` subclasses and rendered by the handlers
in ``api.middleware``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends

from api.dependencies import get_auth_service, get_current_claims
from auth.models import (
    AuthClaims,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    SignupRequest,
)
from auth.service import AuthService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/signup", response_model=MessageResponse)
async def signup(
    req: SignupRequest,
    service: AuthService = Depends(get_auth_service),
) -> Dict[str, Any]:
    """Register a new user."""
    message = await service.register(req)
    return {"message": message}


@router.post("/login", response_model=LoginResponse)
async def login(
    req: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> LoginResponse:
    """Login with username + password."""
    return await service.login(req)


@router.get("/me", response_model=AuthClaims)
async def me(claims: AuthClaims = Depends(get_current_claims)) -> AuthClaims:
    """Return the identity carried by the caller's bearer token."""
    return claims
