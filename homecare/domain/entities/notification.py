"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Any, Mapping

from homecare.utils import parse_timestamp

_WIRE_FIELDS = ("id", "recipientId", "kind", "message", "createdAt", "read")


class NotificationKind(str, Enum):
    """Closed set of notification categories shown in the dashboard."""

    REMINDER = "Reminder"
    ALERT = "Alert"
    UPDATE = "Update"


@dataclass(frozen=True)
class NotificationRecord:
    """Reminder, alert or update delivered to a single recipient.

    Records never change once created except for ``read``, which only moves
    from ``False`` to ``True`` through :meth:`as_read`.
    """

    id: str
    recipient_id: str
    kind: NotificationKind
    message: str
    created_at: datetime
    read: bool = False

    def as_read(self) -> "NotificationRecord":
        """Return this record flagged as read."""

        if self.read:
            return self
        return replace(self, read=True)

    def to_wire(self) -> dict[str, Any]:
        """Return the camelCase payload exchanged with gateways and clients."""

        return {
            "id": self.id,
            "recipientId": self.recipient_id,
            "kind": self.kind.value,
            "message": self.message,
            "createdAt": self.created_at.isoformat(),
            "read": self.read,
        }

    @classmethod
    def from_wire(cls, data: Mapping[str, Any]) -> "NotificationRecord":
        """Build a record from its wire representation.

        Raises ``ValueError`` when the payload is incomplete or malformed.
        """

        missing = [name for name in _WIRE_FIELDS if name not in data]
        if missing:
            raise ValueError(f"Notification payload is missing fields: {', '.join(missing)}")

        read = data["read"]
        if not isinstance(read, bool):
            raise ValueError("Notification 'read' flag must be a boolean")

        created_at = parse_timestamp(data["createdAt"])

        return cls(
            id=str(data["id"]),
            recipient_id=str(data["recipientId"]),
            kind=NotificationKind(data["kind"]),
            message=str(data["message"]),
            created_at=created_at,
            read=read,
        )


__all__ = ["NotificationKind", "NotificationRecord"]
