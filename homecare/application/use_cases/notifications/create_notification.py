"""Use case for storing a new notification for a recipient."""

from __future__ import annotations

from datetime import datetime
from uuid import uuid4

from sqlalchemy.orm import Session

from homecare.domain.entities import NotificationKind, NotificationRecord
from homecare.infrastructure.repositories import NotificationRepository
from homecare.utils import ensure_app_timezone, now_in_app_timezone


def create_notification(
    session: Session,
    *,
    recipient_id: str,
    kind: NotificationKind | str,
    message: str,
    created_at: datetime | None = None,
    notification_id: str | None = None,
) -> NotificationRecord:
    """Persist an unread notification and return the stored record."""

    recipient_id = (recipient_id or "").strip()
    if not recipient_id:
        raise ValueError("The notification recipient is required")
    message = (message or "").strip()
    if not message:
        raise ValueError("The notification message cannot be empty")

    record = NotificationRecord(
        id=notification_id or uuid4().hex,
        recipient_id=recipient_id,
        kind=NotificationKind(kind),
        message=message,
        created_at=ensure_app_timezone(created_at) or now_in_app_timezone(),
        read=False,
    )
    return NotificationRepository(session).create(record)
