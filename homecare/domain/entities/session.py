"""Snapshot of the authentication provider consumed by the controller."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SessionSnapshot:
    """Current identity and whether the auth provider is still resolving it."""

    current_user_id: str | None = None
    is_resolving: bool = True

    def __post_init__(self) -> None:
        user_id = self.current_user_id
        if user_id is not None and not str(user_id).strip():
            object.__setattr__(self, "current_user_id", None)

    @property
    def has_identity(self) -> bool:
        return not self.is_resolving and self.current_user_id is not None

    @classmethod
    def resolving(cls) -> "SessionSnapshot":
        return cls(current_user_id=None, is_resolving=True)

    @classmethod
    def anonymous(cls) -> "SessionSnapshot":
        return cls(current_user_id=None, is_resolving=False)

    @classmethod
    def authenticated(cls, user_id: str) -> "SessionSnapshot":
        return cls(current_user_id=user_id, is_resolving=False)


__all__ = ["SessionSnapshot"]
