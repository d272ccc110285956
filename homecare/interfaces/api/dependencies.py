"""FastAPI dependency utilities."""

from fastapi import Header, HTTPException, status

from homecare.config import USER_HEADER


def get_current_user_id(
    x_user_id: str | None = Header(default=None, alias=USER_HEADER),
) -> str:
    """Return the identity forwarded by the session provider.

    Authentication itself happens upstream; this service only trusts the
    ``X-User-Id`` header set by the gateway in front of it.
    """

    user_id = (x_user_id or "").strip()
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return user_id
