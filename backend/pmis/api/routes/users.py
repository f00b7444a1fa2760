"""User Routes — /api/users. Passwords are write-only.

Invariants:
    - username and email are unique: 409 on clash
    - Responses use UserPublic (no password field)
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, status

from pmis.api.dependencies import get_storage
from pmis.api.routes.route_helpers import ensure_unique, get_or_404, parse_body
from pmis.infrastructure.storage import Storage
from pmis.schemas.users import UserCreate, UserPublic

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=list[UserPublic])
async def list_users(storage: Storage = Depends(get_storage)):
    return await storage.users.list()


@router.get("/{user_id}", response_model=UserPublic)
async def get_user(user_id: int, storage: Storage = Depends(get_storage)):
    return await get_or_404(storage.users, user_id, "User")


@router.post("", response_model=UserPublic, status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: Any = Body(...), storage: Storage = Depends(get_storage),
):
    body = parse_body(UserCreate, payload, "user")
    await ensure_unique(storage.users, "username", body.username, "Username")
    await ensure_unique(storage.users, "email", body.email, "Email")
    user = await storage.users.create(body.model_dump())
    logger.info(
        f"User created: {user.username}",
        extra={"entity": "User", "entity_id": user.id},
    )
    return user
