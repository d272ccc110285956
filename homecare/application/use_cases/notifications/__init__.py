"""Use cases backing the notification REST endpoints."""

from .create_notification import create_notification
from .list_notifications import list_notifications
from .mark_notifications_read import mark_all_notifications_read, mark_notification_read

__all__ = [
    "create_notification",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
]
