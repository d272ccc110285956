"""End-to-end flow: controller -> HTTP gateway -> REST API -> database."""

from __future__ import annotations

import httpx
import pytest

from homecare.application.notifications import MarkAllAsRead, MarkAsRead, NotificationController
from homecare.application.use_cases.notifications import create_notification
from homecare.domain.entities import NotificationPhase, SessionSnapshot
from homecare.infrastructure.database import Base, SessionLocal, engine, initialize_database
from homecare.infrastructure.gateways import HttpNotificationGateway, demo_notifications
from homecare.infrastructure.repositories import NotificationRepository
from main import create_app

pytestmark = pytest.mark.anyio


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
async def gateway():
    client = httpx.AsyncClient(
        transport=httpx.ASGITransport(app=create_app()), base_url="http://testserver"
    )
    yield HttpNotificationGateway("http://testserver", client=client)
    await client.aclose()


def _seed(user_id: str) -> None:
    with SessionLocal() as session:
        for sample in demo_notifications(user_id):
            record = create_notification(
                session,
                recipient_id=user_id,
                kind=sample.kind,
                message=sample.message,
                created_at=sample.created_at,
                notification_id=sample.id,
            )
            if sample.read:
                NotificationRepository(session).mark_as_read(user_id, record.id)


async def test_dashboard_session_marks_notifications_through_the_api(gateway) -> None:
    _seed("nurse-1")
    controller = NotificationController(gateway)

    controller.apply_session(SessionSnapshot.resolving())
    await controller.wait_idle()
    assert controller.state.phase is NotificationPhase.RESOLVING

    await controller.apply_session(SessionSnapshot.authenticated("nurse-1"))
    assert controller.state.phase is NotificationPhase.LOADED
    assert controller.unread_count == 2

    await controller.dispatch(MarkAsRead("notif1"))
    assert controller.state.find("notif1").read is True
    assert controller.unread_count == 1

    await controller.dispatch(MarkAllAsRead())
    assert controller.unread_count == 0
    assert controller.notices == ()
    assert controller.state.generation == controller.generation == 3


async def test_unknown_notification_surfaces_notice(gateway) -> None:
    _seed("nurse-1")
    controller = NotificationController(gateway)
    await controller.apply_session(SessionSnapshot.authenticated("nurse-1"))

    await controller.mark_as_read("does-not-exist")

    assert controller.state.phase is NotificationPhase.LOADED
    assert controller.unread_count == 2
    (notice,) = controller.notices
    assert notice.notification_id == "does-not-exist"
