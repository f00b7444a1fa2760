"""Notification Schemas — per-user messages with a read flag."""

from pydantic import Field

from pmis.schemas.base import ApiModel, RecordMixin


class NotificationCreate(ApiModel):
    user_id: int | None = None
    title: str = Field(min_length=1)
    message: str = Field(min_length=1)
    type: str = "info"
    read: bool = False


class Notification(RecordMixin, NotificationCreate):
    pass
