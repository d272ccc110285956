"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from homecare.domain.entities import NotificationKind, NotificationRecord


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NotificationRead(_CamelModel):
    """Representation of a notification delivered to the client."""

    id: str
    recipient_id: str
    kind: NotificationKind
    message: str
    created_at: datetime
    read: bool

    @classmethod
    def from_entity(cls, notification: NotificationRecord) -> "NotificationRead":
        return cls(
            id=notification.id,
            recipient_id=notification.recipient_id,
            kind=notification.kind,
            message=notification.message,
            created_at=notification.created_at,
            read=notification.read,
        )


class NotificationListResponse(_CamelModel):
    """Notifications of the current user plus the unread badge value."""

    notifications: list[NotificationRead] = Field(default_factory=list)
    unread_count: int = Field(0, ge=0)


class MarkReadResponse(_CamelModel):
    ok: bool = True
    id: str


class MarkAllReadResponse(_CamelModel):
    ok: bool = True
    marked_count: int = Field(0, ge=0)


__all__ = [
    "MarkAllReadResponse",
    "MarkReadResponse",
    "NotificationListResponse",
    "NotificationRead",
]
