"""Dictionary-backed gateway used for demos and tests."""

from __future__ import annotations

from collections import defaultdict
from datetime import datetime, timedelta
from typing import DefaultDict, Iterable

from homecare.application.ports import NotificationGateway
from homecare.domain.entities import NotificationKind, NotificationRecord
from homecare.domain.exceptions import MutationFailure
from homecare.utils import now_in_app_timezone


class InMemoryNotificationGateway(NotificationGateway):
    """Keep notifications per recipient in insertion order."""

    def __init__(self, records: Iterable[NotificationRecord] = ()) -> None:
        self._records: DefaultDict[str, dict[str, NotificationRecord]] = defaultdict(dict)
        for record in records:
            self.add(record)

    def add(self, record: NotificationRecord) -> None:
        """Store ``record``; identifiers cannot be reused for a recipient."""

        bucket = self._records[record.recipient_id]
        if record.id in bucket:
            raise ValueError(f"Notification id {record.id} already exists for {record.recipient_id}")
        bucket[record.id] = record

    def snapshot(self, user_id: str) -> list[NotificationRecord]:
        return list(self._records.get(user_id, {}).values())

    async def fetch(self, user_id: str) -> list[NotificationRecord]:
        return self.snapshot(user_id)

    async def mark_one_read(self, user_id: str, notification_id: str) -> None:
        bucket = self._records.get(user_id, {})
        record = bucket.get(notification_id)
        if record is None:
            raise MutationFailure(f"Notification {notification_id} was not found")
        bucket[notification_id] = record.as_read()

    async def mark_all_read(self, user_id: str) -> None:
        bucket = self._records.get(user_id)
        if not bucket:
            return
        for notification_id, record in bucket.items():
            bucket[notification_id] = record.as_read()


def demo_notifications(recipient_id: str, now: datetime | None = None) -> list[NotificationRecord]:
    """Return the sample notifications shown on a fresh dashboard."""

    now = now or now_in_app_timezone()
    return [
        NotificationRecord(
            id="notif1",
            recipient_id=recipient_id,
            kind=NotificationKind.REMINDER,
            message="Appointment with Alice Wonderland in 1 hour.",
            created_at=now - timedelta(minutes=5),
        ),
        NotificationRecord(
            id="notif2",
            recipient_id=recipient_id,
            kind=NotificationKind.ALERT,
            message="Bob The Builder missed medication dose.",
            created_at=now - timedelta(days=1),
        ),
        NotificationRecord(
            id="notif3",
            recipient_id=recipient_id,
            kind=NotificationKind.UPDATE,
            message="New care plan assigned for Charlie Chaplin.",
            created_at=now - timedelta(days=2),
            read=True,
        ),
        NotificationRecord(
            id="notif4",
            recipient_id=recipient_id,
            kind=NotificationKind.REMINDER,
            message="Follow-up call with Diana Prince due tomorrow.",
            created_at=now - timedelta(days=3),
            read=True,
        ),
    ]


__all__ = ["InMemoryNotificationGateway", "demo_notifications"]
