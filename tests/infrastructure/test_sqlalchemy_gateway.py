"""Tests for the SQL-backed notification gateway and repository."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.exc import OperationalError

from homecare.application.use_cases.notifications import create_notification
from homecare.domain.entities import NotificationKind
from homecare.domain.exceptions import FetchFailure, MutationFailure
from homecare.infrastructure.database import Base, SessionLocal, engine, initialize_database
from homecare.infrastructure.gateways import SqlAlchemyNotificationGateway
from homecare.infrastructure.models import NotificationModel

pytestmark = pytest.mark.anyio

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def reset_database():
    """Ensure the test database starts from a clean state for each test."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)


def _seed() -> list[str]:
    with SessionLocal() as session:
        ids = [
            create_notification(
                session,
                recipient_id="u1",
                kind=NotificationKind.REMINDER,
                message="Appointment with Alice Wonderland in 1 hour.",
                created_at=NOW - timedelta(hours=1),
                notification_id="n1",
            ).id,
            create_notification(
                session,
                recipient_id="u1",
                kind="Alert",
                message="Bob The Builder missed medication dose.",
                created_at=NOW,
            ).id,
            create_notification(
                session,
                recipient_id="u2",
                kind=NotificationKind.UPDATE,
                message="New care plan assigned for Charlie Chaplin.",
                created_at=NOW,
                notification_id="foreign",
            ).id,
        ]
    return ids


async def test_fetch_returns_only_recipient_records_newest_first() -> None:
    _, generated_id, _ = _seed()
    gateway = SqlAlchemyNotificationGateway(SessionLocal)

    records = await gateway.fetch("u1")

    assert [record.id for record in records] == [generated_id, "n1"]
    assert all(record.recipient_id == "u1" for record in records)
    assert all(record.read is False for record in records)
    assert records[0].created_at == NOW


async def test_mark_one_read_is_idempotent_and_scoped() -> None:
    _seed()
    gateway = SqlAlchemyNotificationGateway(SessionLocal)

    await gateway.mark_one_read("u1", "n1")
    await gateway.mark_one_read("u1", "n1")

    records = {record.id: record for record in await gateway.fetch("u1")}
    assert records["n1"].read is True

    with pytest.raises(MutationFailure):
        await gateway.mark_one_read("u1", "foreign")
    with pytest.raises(MutationFailure):
        await gateway.mark_one_read("u1", "missing")
    assert (await gateway.fetch("u2"))[0].read is False


async def test_mark_all_read_only_touches_current_user() -> None:
    _seed()
    gateway = SqlAlchemyNotificationGateway(SessionLocal)

    await gateway.mark_all_read("u1")
    await gateway.mark_all_read("u1")

    assert all(record.read for record in await gateway.fetch("u1"))
    assert not any(record.read for record in await gateway.fetch("u2"))


async def test_database_errors_are_converted() -> None:
    """Missing tables surface as gateway failures, not SQLAlchemy errors."""

    Base.metadata.drop_all(bind=engine)
    gateway = SqlAlchemyNotificationGateway(SessionLocal)

    with pytest.raises(FetchFailure) as fetch_error:
        await gateway.fetch("u1")
    assert isinstance(fetch_error.value.__cause__, OperationalError)

    with pytest.raises(MutationFailure):
        await gateway.mark_all_read("u1")


def test_create_notification_validates_input() -> None:
    with SessionLocal() as session:
        with pytest.raises(ValueError):
            create_notification(session, recipient_id=" ", kind="Alert", message="x")
        with pytest.raises(ValueError):
            create_notification(session, recipient_id="u1", kind="Alert", message="  ")
        with pytest.raises(ValueError):
            create_notification(session, recipient_id="u1", kind="Memo", message="x")


async def test_equal_timestamps_list_latest_insert_first() -> None:
    with SessionLocal() as session:
        for notification_id in ("first", "second", "third"):
            create_notification(
                session,
                recipient_id="u1",
                kind=NotificationKind.UPDATE,
                message=f"Update {notification_id}",
                created_at=NOW,
                notification_id=notification_id,
            )
        sequences = [
            row.sequence
            for row in session.query(NotificationModel).order_by(NotificationModel.sequence)
        ]

    assert len(set(sequences)) == 3
    assert sequences == sorted(sequences)

    records = await SqlAlchemyNotificationGateway(SessionLocal).fetch("u1")
    assert [record.id for record in records] == ["third", "second", "first"]
