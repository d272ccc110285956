"""Domain entities exposed by the application."""

from .notification import NotificationKind, NotificationRecord
from .notification_state import MutationNotice, NotificationPhase, NotificationState
from .session import SessionSnapshot

__all__ = [
    "MutationNotice",
    "NotificationKind",
    "NotificationPhase",
    "NotificationRecord",
    "NotificationState",
    "SessionSnapshot",
]
