"""Use cases for flagging notifications as read."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from homecare.domain.exceptions import AuthRequired, MutationFailure
from homecare.infrastructure.repositories import NotificationRepository

logger = logging.getLogger(__name__)


def mark_notification_read(session: Session, user_id: str | None, notification_id: str) -> None:
    """Mark ``notification_id`` as read for ``user_id``.

    Marking an already-read notification succeeds. Unknown identifiers and
    notifications owned by another user raise :class:`MutationFailure`.
    """

    if not user_id:
        raise AuthRequired("A user identity is required to update notifications")

    if not NotificationRepository(session).mark_as_read(user_id, notification_id):
        raise MutationFailure(f"Notification {notification_id} was not found")


def mark_all_notifications_read(session: Session, user_id: str | None) -> int:
    """Mark every unread notification of ``user_id`` and return how many changed."""

    if not user_id:
        raise AuthRequired("A user identity is required to update notifications")

    updated = NotificationRepository(session).mark_all_as_read(user_id)
    logger.info("Marked %s notifications as read for %s", updated, user_id)
    return updated
