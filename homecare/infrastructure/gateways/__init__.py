"""Notification gateway implementations."""

from .http_gateway import HttpNotificationGateway
from .memory_gateway import InMemoryNotificationGateway, demo_notifications
from .sqlalchemy_gateway import SqlAlchemyNotificationGateway

__all__ = [
    "HttpNotificationGateway",
    "InMemoryNotificationGateway",
    "SqlAlchemyNotificationGateway",
    "demo_notifications",
]
