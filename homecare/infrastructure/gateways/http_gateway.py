"""Gateway that talks to the notification REST API over HTTP."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from homecare.application.ports import NotificationGateway
from homecare.config import USER_HEADER, get_settings
from homecare.domain.entities import NotificationRecord
from homecare.domain.exceptions import FetchFailure, MutationFailure

logger = logging.getLogger(__name__)


class HttpNotificationGateway(NotificationGateway):
    """Notification API client; the caller's identity travels in ``X-User-Id``."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        settings = get_settings()
        self._base_url = (base_url or settings.notifications_api_url).rstrip("/")
        self._timeout = timeout or settings.notifications_http_timeout
        self._client = client
        self._owns_client = client is None

    async def fetch(self, user_id: str) -> list[NotificationRecord]:
        try:
            response = await self._request("GET", "/notifications/", user_id)
        except httpx.HTTPError as exc:
            logger.warning("Notification API request failed: %s", exc)
            raise FetchFailure("Could not reach the notification service") from exc
        if not response.is_success:
            raise FetchFailure(f"Notification service error: {response.status_code}")

        try:
            payload: Any = response.json()
            entries = payload["notifications"]
            return [NotificationRecord.from_wire(entry) for entry in entries]
        except (ValueError, KeyError, TypeError) as exc:
            logger.warning("Notification API returned an invalid payload: %s", exc)
            raise FetchFailure("The notification service returned an invalid response") from exc

    async def mark_one_read(self, user_id: str, notification_id: str) -> None:
        path = f"/notifications/{quote(notification_id, safe='')}/read"
        await self._mutate("PATCH", path, user_id)

    async def mark_all_read(self, user_id: str) -> None:
        await self._mutate("POST", "/notifications/mark-all-read", user_id)

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def _mutate(self, method: str, path: str, user_id: str) -> None:
        try:
            response = await self._request(method, path, user_id)
        except httpx.HTTPError as exc:
            logger.warning("Notification API request failed: %s", exc)
            raise MutationFailure("Could not reach the notification service") from exc
        if response.status_code == 404:
            raise MutationFailure("Notification not found")
        if not response.is_success:
            raise MutationFailure(f"Notification service error: {response.status_code}")

    async def _request(self, method: str, path: str, user_id: str) -> httpx.Response:
        if self._client is None:
            self._client = httpx.AsyncClient(base_url=self._base_url, timeout=self._timeout)
        return await self._client.request(method, path, headers={USER_HEADER: user_id})


__all__ = ["HttpNotificationGateway"]
