"""Error taxonomy shared by the notification gateways and the controller."""

from __future__ import annotations


class NotificationError(RuntimeError):
    """Base class for every notification center failure."""


class FetchFailure(NotificationError):
    """Raised when the notification list for a user cannot be retrieved."""


class MutationFailure(NotificationError):
    """Raised when a mark-as-read operation is rejected or cannot complete."""


class AuthRequired(NotificationError):
    """Raised when an operation needs a user identity and none is available."""


__all__ = ["AuthRequired", "FetchFailure", "MutationFailure", "NotificationError"]
