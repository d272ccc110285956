"""Command objects the view dispatches into the notification controller."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MarkAsRead:
    """Mark a single notification as read."""

    notification_id: str


@dataclass(frozen=True)
class MarkAllAsRead:
    """Mark every unread notification of the active user as read."""


@dataclass(frozen=True)
class Refresh:
    """Reload the notification list from the gateway."""


@dataclass(frozen=True)
class DismissNotice:
    """Remove a transient mutation notice from the view."""

    notice_id: int


NotificationCommand = MarkAsRead | MarkAllAsRead | Refresh | DismissNotice


__all__ = [
    "DismissNotice",
    "MarkAllAsRead",
    "MarkAsRead",
    "NotificationCommand",
    "Refresh",
]
