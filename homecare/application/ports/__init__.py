"""Interfaces the application layer expects infrastructure to provide."""

from .notification_gateway import NotificationGateway

__all__ = ["NotificationGateway"]
