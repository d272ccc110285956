"""Gateway exposing the SQL notification store through the async contract."""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from anyio import to_thread
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from homecare.application.ports import NotificationGateway
from homecare.domain.entities import NotificationRecord
from homecare.domain.exceptions import FetchFailure, MutationFailure
from homecare.infrastructure.repositories import NotificationRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SqlAlchemyNotificationGateway(NotificationGateway):
    """Run repository calls in a worker thread, one session per call."""

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    async def fetch(self, user_id: str) -> list[NotificationRecord]:
        try:
            return await self._run(lambda repo: list(repo.list_for_user(user_id)))
        except SQLAlchemyError as exc:
            logger.exception("Database error loading notifications for %s", user_id)
            raise FetchFailure("Unable to load notifications from the database") from exc

    async def mark_one_read(self, user_id: str, notification_id: str) -> None:
        try:
            found = await self._run(lambda repo: repo.mark_as_read(user_id, notification_id))
        except SQLAlchemyError as exc:
            logger.exception("Database error marking notification %s as read", notification_id)
            raise MutationFailure("Unable to update the notification") from exc
        if not found:
            raise MutationFailure(f"Notification {notification_id} was not found")

    async def mark_all_read(self, user_id: str) -> None:
        try:
            await self._run(lambda repo: repo.mark_all_as_read(user_id))
        except SQLAlchemyError as exc:
            logger.exception("Database error marking all notifications as read for %s", user_id)
            raise MutationFailure("Unable to update notifications") from exc

    async def _run(self, operation: Callable[[NotificationRepository], T]) -> T:
        def work() -> T:
            session: Session = self._session_factory()
            try:
                return operation(NotificationRepository(session))
            except SQLAlchemyError:
                session.rollback()
                raise
            finally:
                session.close()

        return await to_thread.run_sync(work)


__all__ = ["SqlAlchemyNotificationGateway"]
