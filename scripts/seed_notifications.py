"""Utility script to seed the demo notifications for a user."""

from __future__ import annotations

import argparse

from sqlalchemy.exc import SQLAlchemyError

from homecare.application.use_cases.notifications import create_notification
from homecare.infrastructure.database import SessionLocal, initialize_database
from homecare.infrastructure.gateways import demo_notifications
from homecare.infrastructure.repositories import NotificationRepository


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for seeding."""

    parser = argparse.ArgumentParser(
        description="Seed the sample notification center data for a dashboard user.",
    )
    parser.add_argument(
        "user_id",
        help="Identifier of the user who will receive the notifications",
    )
    parser.add_argument(
        "--keep-read-state",
        action="store_true",
        help="Also mark the sample notifications that are read in the demo data.",
    )
    return parser.parse_args()


def main() -> None:
    """Insert the demo notifications for the requested user."""

    args = parse_args()
    user_id = args.user_id.strip()
    if not user_id:
        raise SystemExit("A user identifier is required.")

    initialize_database()

    session = SessionLocal()
    created = []
    try:
        repository = NotificationRepository(session)
        for sample in demo_notifications(user_id):
            record = create_notification(
                session,
                recipient_id=user_id,
                kind=sample.kind,
                message=sample.message,
                created_at=sample.created_at,
            )
            if args.keep_read_state and sample.read:
                repository.mark_as_read(user_id, record.id)
            created.append(record)
    except ValueError as exc:
        session.rollback()
        raise SystemExit(f"Could not create the notifications: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Error saving notifications to the database: {exc}") from exc
    else:
        print(f"Created {len(created)} notifications for {user_id}:")
        for record in created:
            print(f"  [{record.kind.value}] {record.id}: {record.message}")
    finally:
        session.close()


if __name__ == "__main__":
    main()
