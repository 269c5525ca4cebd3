"""Authentication helpers for API routes.

Tokens are read from the ``auth_token`` cookie and verified, never issued.
"""

from uuid import UUID

from fastapi import HTTPException, status

from blog.domain.service import JWTService
from blog.domain.value import UserId


def require_user_id(
    jwt_service: JWTService, auth_token: str | None, action: str
) -> UserId:
    """Return the authenticated user's id or fail with 401.

    Args:
        jwt_service: JWT service for token verification
        auth_token: JWT token from cookie
        action: What the user was trying to do, for the error message
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return user_id


def require_admin(jwt_service: JWTService, auth_token: str | None) -> UserId:
    """Return the authenticated admin's id, failing with 401 or 403."""
    payload = jwt_service.get_payload_from_token(auth_token)
    if not payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    if payload.role != "admin":
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    try:
        return UserId(UUID(payload.user_id))
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
