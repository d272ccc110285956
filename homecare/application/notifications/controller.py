"""State machine coordinating the notification center of the active user.

The controller is the only component allowed to change what the view shows.
It reacts to :class:`~homecare.domain.entities.SessionSnapshot` updates,
issues gateway calls, and applies fetch results strictly in generation
order: every fetch is stamped with the counter value at issue time and its
outcome is applied only while that value is still the latest one issued.
"""

from __future__ import annotations

import asyncio
import itertools
import logging
from dataclasses import replace
from typing import Callable

from homecare.application.ports import NotificationGateway
from homecare.domain.entities import (
    MutationNotice,
    NotificationPhase,
    NotificationState,
    SessionSnapshot,
)
from homecare.domain.exceptions import FetchFailure, MutationFailure

from .commands import (
    DismissNotice,
    MarkAllAsRead,
    MarkAsRead,
    NotificationCommand,
    Refresh,
)

logger = logging.getLogger(__name__)

Listener = Callable[[NotificationState], None]

DEFAULT_FETCH_ERROR = "Unable to load notifications. Please try again."
DEFAULT_MARK_ONE_ERROR = "Could not mark the notification as read."
DEFAULT_MARK_ALL_ERROR = "Could not mark all notifications as read."


class NotificationController:
    """Own the notification list for the current user and reconcile updates."""

    def __init__(self, gateway: NotificationGateway) -> None:
        self._gateway = gateway
        self._state = NotificationState()
        self._generation = 0
        self._user_id: str | None = None
        # Bumped whenever the identity changes so late mutation replies can
        # tell they belong to a previous session.
        self._identity_epoch = 0
        self._listeners: list[Listener] = []
        self._notices: list[MutationNotice] = []
        self._notice_ids = itertools.count(1)
        self._pending_reads: set[str] = set()
        self._mark_all_pending = False
        self._tasks: set[asyncio.Task[None]] = set()
        self._closed = False

    @property
    def state(self) -> NotificationState:
        return self._state

    @property
    def generation(self) -> int:
        """Latest fetch generation issued."""

        return self._generation

    @property
    def user_id(self) -> str | None:
        return self._user_id

    @property
    def notices(self) -> tuple[MutationNotice, ...]:
        return tuple(self._notices)

    @property
    def unread_count(self) -> int:
        return self._state.unread_count

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` and return a callable that removes it."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # Session handling

    def apply_session(self, session: SessionSnapshot) -> asyncio.Task[None] | None:
        """React to a new auth snapshot.

        Returns the fetch task when the snapshot triggers a load, ``None``
        otherwise. Must be called from the event loop when an identity is
        present; once closed the controller ignores new snapshots.
        """

        if self._closed:
            return None

        if session.is_resolving:
            if self._state.phase is not NotificationPhase.RESOLVING:
                self._generation += 1
                self._reset_identity(None)
                self._set_state(NotificationState(generation=self._state.generation))
            return None

        if not session.has_identity:
            if self._state.phase is not NotificationPhase.UNAUTHENTICATED:
                self._generation += 1
                self._reset_identity(None)
                self._set_state(
                    NotificationState(
                        phase=NotificationPhase.UNAUTHENTICATED,
                        generation=self._state.generation,
                    )
                )
            return None

        user_id = session.current_user_id
        if user_id == self._user_id:
            return None

        # Raises outside the event loop before any state is touched.
        asyncio.get_running_loop()
        self._reset_identity(user_id)
        return self._issue_fetch(revalidate=False)

    # Commands

    async def dispatch(self, command: NotificationCommand) -> None:
        """Run ``command``; commands issued in an illegal state are ignored."""

        if isinstance(command, MarkAsRead):
            await self._mark_as_read(command.notification_id)
        elif isinstance(command, MarkAllAsRead):
            await self._mark_all_as_read()
        elif isinstance(command, Refresh):
            await self._refresh()
        elif isinstance(command, DismissNotice):
            self.dismiss_notice(command.notice_id)
        else:
            raise TypeError(f"Unsupported notification command: {command!r}")

    async def mark_as_read(self, notification_id: str) -> None:
        await self.dispatch(MarkAsRead(notification_id))

    async def mark_all_as_read(self) -> None:
        await self.dispatch(MarkAllAsRead())

    async def refresh(self) -> None:
        await self.dispatch(Refresh())

    def dismiss_notice(self, notice_id: int) -> None:
        remaining = [notice for notice in self._notices if notice.id != notice_id]
        if len(remaining) != len(self._notices):
            self._notices = remaining
            self._notify()

    async def wait_idle(self) -> None:
        """Wait until every fetch issued so far has finished."""

        while self._tasks:
            await asyncio.wait(set(self._tasks))

    async def aclose(self) -> None:
        """Invalidate outstanding work and detach every listener.

        Mutations still waiting on the gateway finish without reloading, and
        every later command or session snapshot is ignored.
        """

        self._closed = True
        self._generation += 1
        self._identity_epoch += 1
        self._pending_reads.clear()
        self._mark_all_pending = False
        tasks = set(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.wait(tasks)
        self._listeners.clear()

    # Internals

    async def _mark_as_read(self, notification_id: str) -> None:
        if self._closed or not self._state.is_loaded or self._user_id is None:
            logger.debug("Ignoring mark-as-read for %s in phase %s", notification_id, self._state.phase.value)
            return

        record = self._state.find(notification_id)
        if record is not None and record.read:
            return
        if notification_id in self._pending_reads:
            return

        user_id = self._user_id
        epoch = self._identity_epoch
        self._pending_reads.add(notification_id)
        try:
            await self._gateway.mark_one_read(user_id, notification_id)
        except Exception as exc:
            self._report_mutation_failure(
                exc, DEFAULT_MARK_ONE_ERROR, epoch=epoch, notification_id=notification_id
            )
            return
        finally:
            if epoch == self._identity_epoch:
                self._pending_reads.discard(notification_id)

        if epoch == self._identity_epoch:
            await self._await_fetch(self._issue_fetch(revalidate=True))

    async def _mark_all_as_read(self) -> None:
        if self._closed or not self._state.can_mark_all_read or self._user_id is None:
            return
        if self._mark_all_pending:
            return

        user_id = self._user_id
        epoch = self._identity_epoch
        self._mark_all_pending = True
        try:
            await self._gateway.mark_all_read(user_id)
        except Exception as exc:
            self._report_mutation_failure(exc, DEFAULT_MARK_ALL_ERROR, epoch=epoch)
            return
        finally:
            if epoch == self._identity_epoch:
                self._mark_all_pending = False

        if epoch == self._identity_epoch:
            await self._await_fetch(self._issue_fetch(revalidate=True))

    async def _refresh(self) -> None:
        if self._closed or self._user_id is None:
            return
        await self._await_fetch(self._issue_fetch(revalidate=True))

    def _issue_fetch(self, *, revalidate: bool) -> asyncio.Task[None]:
        user_id = self._user_id
        if user_id is None or self._closed:  # pragma: no cover - callers check first
            raise RuntimeError("Cannot fetch notifications without an open session")

        loop = asyncio.get_running_loop()
        self._generation += 1
        generation = self._generation
        if revalidate and self._state.is_loaded:
            self._set_state(replace(self._state, refreshing=True))
        else:
            self._set_state(
                NotificationState(phase=NotificationPhase.LOADING, generation=self._state.generation)
            )

        task = loop.create_task(self._run_fetch(user_id, generation))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _run_fetch(self, user_id: str, generation: int) -> None:
        try:
            records = await self._gateway.fetch(user_id)
        except FetchFailure as exc:
            message = str(exc) or DEFAULT_FETCH_ERROR
        except Exception:
            logger.exception("Unexpected error fetching notifications for %s", user_id)
            message = DEFAULT_FETCH_ERROR
        else:
            if generation != self._generation:
                logger.debug("Discarding stale fetch result (generation %s < %s)", generation, self._generation)
                return
            self._set_state(
                NotificationState(
                    phase=NotificationPhase.LOADED,
                    items=tuple(records),
                    generation=generation,
                )
            )
            return

        if generation != self._generation:
            logger.debug("Discarding stale fetch failure (generation %s < %s)", generation, self._generation)
            return
        logger.warning("Fetching notifications for %s failed: %s", user_id, message)
        self._set_state(
            NotificationState(
                phase=NotificationPhase.ERROR,
                generation=generation,
                error_message=message,
            )
        )

    @staticmethod
    async def _await_fetch(task: asyncio.Task[None]) -> None:
        # asyncio.wait does not re-raise when aclose() cancels the task.
        await asyncio.wait({task})

    def _reset_identity(self, user_id: str | None) -> None:
        self._identity_epoch += 1
        self._user_id = user_id
        self._pending_reads.clear()
        self._mark_all_pending = False
        self._notices = []

    def _report_mutation_failure(
        self,
        exc: Exception,
        default_message: str,
        *,
        epoch: int,
        notification_id: str | None = None,
    ) -> None:
        if isinstance(exc, MutationFailure):
            logger.warning("Notification mutation failed: %s", exc)
            message = str(exc) or default_message
        else:
            logger.exception("Unexpected error while marking notifications as read")
            message = default_message

        if epoch != self._identity_epoch:
            return
        self._notices.append(
            MutationNotice(id=next(self._notice_ids), message=message, notification_id=notification_id)
        )
        self._notify()

    def _set_state(self, state: NotificationState) -> None:
        self._state = state
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self._state)
            except Exception:
                logger.exception("Notification listener %r failed", listener)


__all__ = ["NotificationController"]
