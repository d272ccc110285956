"""Notification center: controller, commands and view helpers."""

from .commands import (
    DismissNotice,
    MarkAllAsRead,
    MarkAsRead,
    NotificationCommand,
    Refresh,
)
from .controller import NotificationController
from .presentation import (
    EMPTY_STATE_MESSAGE,
    EMPTY_STATE_TITLE,
    KindPresentation,
    empty_state_copy,
    format_relative_time,
    kind_presentation,
    sort_for_display,
    unread_count,
)

__all__ = [
    "DismissNotice",
    "EMPTY_STATE_MESSAGE",
    "EMPTY_STATE_TITLE",
    "KindPresentation",
    "MarkAllAsRead",
    "MarkAsRead",
    "NotificationCommand",
    "NotificationController",
    "Refresh",
    "empty_state_copy",
    "format_relative_time",
    "kind_presentation",
    "sort_for_display",
    "unread_count",
]
