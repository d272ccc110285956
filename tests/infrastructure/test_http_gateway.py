"""Tests for the HTTP notification gateway."""

from __future__ import annotations

import json

import httpx
import pytest
from fastapi import Depends, FastAPI

from homecare.config import USER_HEADER
from homecare.domain.entities import NotificationKind
from homecare.domain.exceptions import FetchFailure, MutationFailure
from homecare.infrastructure.gateways import HttpNotificationGateway
from homecare.interfaces.api.dependencies import get_current_user_id

pytestmark = pytest.mark.anyio

BASE_URL = "http://notifications.test"

LIST_PAYLOAD = {
    "notifications": [
        {
            "id": "n1",
            "recipientId": "u1",
            "kind": "Reminder",
            "message": "Appointment with Alice Wonderland in 1 hour.",
            "createdAt": "2024-05-01T09:00:00Z",
            "read": False,
        },
        {
            "id": "n2",
            "recipientId": "u1",
            "kind": "Alert",
            "message": "Bob The Builder missed medication dose.",
            "createdAt": "2024-04-30T09:00:00+00:00",
            "read": True,
        },
    ],
    "unreadCount": 1,
}


def _gateway(handler) -> HttpNotificationGateway:
    client = httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(handler))
    return HttpNotificationGateway(BASE_URL, client=client)


async def test_fetch_parses_wire_records_and_sends_identity() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=LIST_PAYLOAD)

    records = await _gateway(handler).fetch("u1")

    assert [(record.id, record.kind, record.read) for record in records] == [
        ("n1", NotificationKind.REMINDER, False),
        ("n2", NotificationKind.ALERT, True),
    ]
    (request,) = seen
    assert request.method == "GET"
    assert request.url.path == "/notifications/"
    assert request.headers["X-User-Id"] == "u1"


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(500, json={"detail": "boom"}),
        httpx.Response(200, content=b"not json"),
        httpx.Response(200, json={"items": []}),
        httpx.Response(200, json={"notifications": [{"id": "n1"}]}),
    ],
)
async def test_fetch_failures_are_converted(response: httpx.Response) -> None:
    gateway = _gateway(lambda request: response)

    with pytest.raises(FetchFailure):
        await gateway.fetch("u1")


async def test_transport_errors_are_converted() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    gateway = _gateway(handler)

    with pytest.raises(FetchFailure):
        await gateway.fetch("u1")
    with pytest.raises(MutationFailure):
        await gateway.mark_all_read("u1")


async def test_mark_one_read_targets_escaped_path() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"ok": True, "id": "a/b"})

    await _gateway(handler).mark_one_read("u1", "a/b")

    (request,) = seen
    assert request.method == "PATCH"
    assert request.url.raw_path == b"/notifications/a%2Fb/read"


async def test_mark_one_read_not_found_is_mutation_failure() -> None:
    gateway = _gateway(lambda request: httpx.Response(404, json={"detail": "Notification x was not found"}))

    with pytest.raises(MutationFailure):
        await gateway.mark_one_read("u1", "x")


async def test_mark_all_read_posts_to_collection() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, content=json.dumps({"ok": True, "markedCount": 2}))

    await _gateway(handler).mark_all_read("u1")

    (request,) = seen
    assert (request.method, request.url.path) == ("POST", "/notifications/mark-all-read")


async def test_identity_header_is_the_one_the_api_reads() -> None:
    app = FastAPI()

    @app.get("/notifications/")
    def echo_caller(user_id: str = Depends(get_current_user_id)) -> dict:
        entry = dict(LIST_PAYLOAD["notifications"][0], recipientId=user_id)
        return {"notifications": [entry]}

    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app), base_url=BASE_URL
    ) as client:
        records = await HttpNotificationGateway(BASE_URL, client=client).fetch("nurse-7")

    assert [record.recipient_id for record in records] == ["nurse-7"]
    assert USER_HEADER == "X-User-Id"
