"""Endpoints exposing the notification store to dashboard clients."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from homecare.application.use_cases.notifications import (
    list_notifications,
    mark_all_notifications_read,
    mark_notification_read,
)
from homecare.domain.exceptions import MutationFailure
from homecare.infrastructure.database import get_db
from homecare.interfaces.api.dependencies import get_current_user_id
from homecare.interfaces.api.schemas import (
    MarkAllReadResponse,
    MarkReadResponse,
    NotificationListResponse,
    NotificationRead,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])
logger = logging.getLogger(__name__)


@router.get("/", response_model=NotificationListResponse, response_model_by_alias=True)
def list_user_notifications(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
) -> NotificationListResponse:
    """Return every notification of the current user."""

    notifications = list_notifications(db, user_id)
    return NotificationListResponse(
        notifications=[NotificationRead.from_entity(item) for item in notifications],
        unread_count=sum(1 for item in notifications if not item.read),
    )


@router.patch(
    "/{notification_id}/read",
    response_model=MarkReadResponse,
    response_model_by_alias=True,
)
def mark_user_notification_read(
    notification_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
) -> MarkReadResponse:
    """Mark a single notification as read; repeated calls succeed."""

    try:
        mark_notification_read(db, user_id, notification_id)
    except MutationFailure as exc:
        logger.warning("User %s could not mark notification %s: %s", user_id, notification_id, exc)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return MarkReadResponse(id=notification_id)


@router.post(
    "/mark-all-read",
    response_model=MarkAllReadResponse,
    response_model_by_alias=True,
)
def mark_all_user_notifications_read(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
) -> MarkAllReadResponse:
    """Mark all unread notifications of the current user as read."""

    marked = mark_all_notifications_read(db, user_id)
    return MarkAllReadResponse(marked_count=marked)
