"""Immutable values describing the notification controller state."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .notification import NotificationRecord


class NotificationPhase(str, Enum):
    """Lifecycle phases of the notification center."""

    RESOLVING = "resolving"
    UNAUTHENTICATED = "unauthenticated"
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


@dataclass(frozen=True)
class NotificationState:
    """Snapshot handed to view bindings after every controller change."""

    phase: NotificationPhase = NotificationPhase.RESOLVING
    items: tuple[NotificationRecord, ...] = ()
    generation: int = 0
    error_message: str | None = None
    refreshing: bool = False

    @property
    def unread_count(self) -> int:
        return sum(1 for item in self.items if not item.read)

    @property
    def is_loaded(self) -> bool:
        return self.phase is NotificationPhase.LOADED

    @property
    def is_empty(self) -> bool:
        return self.is_loaded and not self.items

    @property
    def can_mark_all_read(self) -> bool:
        """Whether the "mark all as read" affordance should be enabled."""

        return self.is_loaded and self.unread_count > 0

    def find(self, notification_id: str) -> NotificationRecord | None:
        for item in self.items:
            if item.id == notification_id:
                return item
        return None


@dataclass(frozen=True)
class MutationNotice:
    """Transient, dismissible message about a failed mark operation."""

    id: int
    message: str
    notification_id: str | None = None


__all__ = ["MutationNotice", "NotificationPhase", "NotificationState"]
