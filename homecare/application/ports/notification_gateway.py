"""Port through which the notification center reads and mutates records."""

from __future__ import annotations

from abc import ABC, abstractmethod

from homecare.domain.entities import NotificationRecord


class NotificationGateway(ABC):
    """Fetch and mark-as-read primitives against the notification store.

    Every call is scoped to ``user_id``; implementations must never return or
    touch records owned by another recipient.
    """

    @abstractmethod
    async def fetch(self, user_id: str) -> list[NotificationRecord]:
        """Return every record for ``user_id`` in a stable order.

        Raises :class:`~homecare.domain.exceptions.FetchFailure` on transport
        or backend errors.
        """

    @abstractmethod
    async def mark_one_read(self, user_id: str, notification_id: str) -> None:
        """Flag a single record as read.

        Succeeds without side effects when the record is already read. Raises
        :class:`~homecare.domain.exceptions.MutationFailure` when the record
        does not exist or belongs to someone else.
        """

    @abstractmethod
    async def mark_all_read(self, user_id: str) -> None:
        """Flag every unread record of ``user_id`` as read (no-op if none)."""


__all__ = ["NotificationGateway"]
