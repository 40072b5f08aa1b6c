"""
Read-only user lookup routes.
"""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends

from api.dependencies import get_user_store
from auth.exceptions import StoreFailure, UserLookupMiss
from auth.models import UserRecord, UserStore
from auth.validation import sanitize
from database.users import StoreError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=List[UserRecord])
async def get_users(store: UserStore = Depends(get_user_store)) -> List[UserRecord]:
    try:
        return await store.find_all()
    except StoreError as exc:
        raise StoreFailure(f"Error while fetching all users: {exc}") from exc


@router.get("/id/{user_id}", response_model=UserRecord)
async def get_user_by_id(
    user_id: str,
    store: UserStore = Depends(get_user_store),
) -> UserRecord:
    try:
        user = await store.find_by_id(user_id)
    except StoreError as exc:
        raise StoreFailure(f"Error while fetching user by ID: {exc}") from exc
    if user is None:
        raise UserLookupMiss()
    return user


@router.get("/username/{username}", response_model=UserRecord)
async def get_user_by_username(
    username: str,
    store: UserStore = Depends(get_user_store),
) -> UserRecord:
    try:
        user = await store.find_by_username(sanitize(username))
    except StoreError as exc:
        raise StoreFailure(f"Error while fetching user by username: {exc}") from exc
    if user is None:
        raise UserLookupMiss()
    return user
