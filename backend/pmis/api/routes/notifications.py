"""Notification Routes — /api/notifications for the implicit current user.

Invariants:
    - GET lists only notifications whose userId is settings.default_user_id
    - PUT /{id}/read flips the read flag: 204, or 404 for an unknown id
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Response, status

from pmis.api.dependencies import get_app_settings, get_storage
from pmis.api.routes.route_helpers import parse_body
from pmis.config import Settings
from pmis.core.errors import ResourceNotFoundError
from pmis.infrastructure.storage import Storage
from pmis.schemas.notifications import Notification, NotificationCreate

router = APIRouter(prefix="/api/notifications", tags=["notifications"])


@router.get("", response_model=list[Notification])
async def list_notifications(
    storage: Storage = Depends(get_storage),
    settings: Settings = Depends(get_app_settings),
):
    return await storage.notifications.list(user_id=settings.default_user_id)


@router.post("", response_model=Notification, status_code=status.HTTP_201_CREATED)
async def create_notification(
    payload: Any = Body(...), storage: Storage = Depends(get_storage),
):
    body = parse_body(NotificationCreate, payload, "notification")
    return await storage.notifications.create(body.model_dump())


@router.put("/{notification_id}/read", status_code=status.HTTP_204_NO_CONTENT)
async def mark_as_read(notification_id: int, storage: Storage = Depends(get_storage)):
    if not await storage.mark_notification_read(notification_id):
        raise ResourceNotFoundError("Notification", notification_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
