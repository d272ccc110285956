"""SQLAlchemy model for persisted notifications."""

from uuid import uuid4

from sqlalchemy import Column, DateTime, Integer, String, Text

from homecare.infrastructure.database import Base
from homecare.utils import now_in_app_naive_datetime


def _new_notification_id() -> str:
    return uuid4().hex


class NotificationModel(Base):
    """Database representation for user notifications."""

    __tablename__ = "notification"

    # Autoincrementing insertion order; keeps listings stable for equal timestamps.
    sequence = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(
        String(64), unique=True, nullable=False, index=True, default=_new_notification_id
    )
    recipient_id = Column(String(128), nullable=False, index=True)
    kind = Column(String(20), nullable=False)
    message = Column(Text, nullable=False)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    read_at = Column(DateTime(), nullable=True)


__all__ = ["NotificationModel"]
