"""Pure helpers used by views to render notification lists."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable, Sequence

from homecare.domain.entities import NotificationKind, NotificationRecord, NotificationState
from homecare.utils import ensure_app_timezone

EMPTY_STATE_TITLE = "No New Notifications"
EMPTY_STATE_MESSAGE = "You're all caught up!"

_RECENT_THRESHOLD = timedelta(minutes=1)
_ABSOLUTE_AFTER_DAYS = 7


@dataclass(frozen=True)
class KindPresentation:
    """Icon and accent color for a notification row."""

    icon: str
    accent: str


_KIND_STYLES: dict[NotificationKind, KindPresentation] = {
    NotificationKind.REMINDER: KindPresentation(icon="bell-ring", accent="yellow"),
    NotificationKind.ALERT: KindPresentation(icon="message-circle-warning", accent="red"),
    NotificationKind.UPDATE: KindPresentation(icon="check-circle-2", accent="blue"),
}


def unread_count(items: Iterable[NotificationRecord]) -> int:
    """Return how many records are still unread."""

    return sum(1 for item in items if not item.read)


def sort_for_display(items: Sequence[NotificationRecord]) -> list[NotificationRecord]:
    """Return ``items`` newest first; ties keep their gateway order."""

    return sorted(items, key=lambda item: ensure_app_timezone(item.created_at), reverse=True)


def empty_state_copy(state: NotificationState) -> tuple[str, str] | None:
    """Return the empty-list title and message, or ``None`` when not applicable."""

    if not state.is_empty:
        return None
    return EMPTY_STATE_TITLE, EMPTY_STATE_MESSAGE


def kind_presentation(kind: NotificationKind, *, read: bool = False) -> KindPresentation:
    """Return the icon and accent for ``kind``; read rows use a muted accent."""

    style = _KIND_STYLES[kind]
    if read:
        return KindPresentation(icon=style.icon, accent="muted")
    return style


def format_relative_time(created_at: datetime, now: datetime) -> str:
    """Describe ``created_at`` relative to ``now`` ("5 minutes ago")."""

    created = ensure_app_timezone(created_at)
    reference = ensure_app_timezone(now)
    delta = reference - created
    if delta < _RECENT_THRESHOLD:
        return "just now"

    minutes = int(delta.total_seconds() // 60)
    if minutes < 60:
        return _plural(minutes, "minute")

    hours = minutes // 60
    if hours < 24:
        return _plural(hours, "hour")

    days = (reference.date() - created.date()).days
    if days <= 1:
        return "Yesterday"
    if days < _ABSOLUTE_AFTER_DAYS:
        return f"{days} days ago"
    return f"{created:%b} {created.day}, {created.year}"


def _plural(value: int, unit: str) -> str:
    suffix = "" if value == 1 else "s"
    return f"{value} {unit}{suffix} ago"


__all__ = [
    "EMPTY_STATE_MESSAGE",
    "EMPTY_STATE_TITLE",
    "KindPresentation",
    "empty_state_copy",
    "format_relative_time",
    "kind_presentation",
    "sort_for_display",
    "unread_count",
]
