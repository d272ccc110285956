"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence
from uuid import uuid4

from sqlalchemy.orm import Session

from homecare.domain.entities import NotificationKind, NotificationRecord
from homecare.infrastructure.models import NotificationModel
from homecare.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)


class NotificationRepository:
    """Provide read and mark-as-read operations scoped to a recipient."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_user(self, user_id: str) -> Sequence[NotificationRecord]:
        query = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.recipient_id == user_id)
            .order_by(
                NotificationModel.created_at.desc(), NotificationModel.sequence.desc()
            )
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, notification: NotificationRecord) -> NotificationRecord:
        model = NotificationModel(
            id=notification.id or uuid4().hex,
            recipient_id=notification.recipient_id,
            kind=notification.kind.value,
            message=notification.message,
            created_at=ensure_app_naive_datetime(notification.created_at)
            or ensure_app_naive_datetime(now_in_app_timezone()),
            read_at=ensure_app_naive_datetime(now_in_app_timezone())
            if notification.read
            else None,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def mark_as_read(self, user_id: str, notification_id: str) -> bool:
        """Flag one record as read; ``False`` when it is not owned by ``user_id``."""

        model = self._get_model(user_id, notification_id)
        if model is None:
            return False
        if model.read_at is None:
            model.read_at = ensure_app_naive_datetime(now_in_app_timezone())
            self.session.add(model)
            self.session.commit()
        return True

    def mark_all_as_read(self, user_id: str) -> int:
        updated = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.recipient_id == user_id,
                NotificationModel.read_at.is_(None),
            )
            .update(
                {
                    NotificationModel.read_at: ensure_app_naive_datetime(
                        now_in_app_timezone()
                    )
                },
                synchronize_session=False,
            )
        )
        self.session.commit()
        return updated

    def _get_model(self, user_id: str, notification_id: str) -> NotificationModel | None:
        return (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.id == notification_id,
                NotificationModel.recipient_id == user_id,
            )
            .first()
        )

    @staticmethod
    def _to_entity(model: NotificationModel) -> NotificationRecord:
        return NotificationRecord(
            id=model.id,
            recipient_id=model.recipient_id,
            kind=NotificationKind(model.kind),
            message=model.message,
            created_at=ensure_app_timezone(model.created_at),
            read=model.read_at is not None,
        )


__all__ = ["NotificationRepository"]
