from .notification import (
    MarkAllReadResponse,
    MarkReadResponse,
    NotificationListResponse,
    NotificationRead,
)

__all__ = [
    "MarkAllReadResponse",
    "MarkReadResponse",
    "NotificationListResponse",
    "NotificationRead",
]
