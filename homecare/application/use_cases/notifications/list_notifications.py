"""Use case for listing the notifications of a user."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from homecare.domain.entities import NotificationRecord
from homecare.domain.exceptions import AuthRequired
from homecare.infrastructure.repositories import NotificationRepository


def list_notifications(session: Session, user_id: str | None) -> Sequence[NotificationRecord]:
    """Return every notification owned by ``user_id``."""

    if not user_id:
        raise AuthRequired("A user identity is required to list notifications")
    return NotificationRepository(session).list_for_user(user_id)
