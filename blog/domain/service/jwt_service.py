"""JWT token domain service."""

from uuid import UUID

import logfire

from blog.config import AuthSettings
from blog.domain.value import UserId
from blog.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, username: str, role: str = "user") -> str:
        """Create JWT token for user.

        Args:
            user_id: User ID
            username: Username
            role: "user" or "admin"

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id, role=role):
            return create_token(user_id, username, self.auth_settings, role=role)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info(
                    "JWT token verified", user_id=payload.user_id, role=payload.role
                )
                return payload
            except JWTError as e:
                logfire.error("JWT token verification failed", error=str(e))
                raise

    def get_payload_from_token(self, token: str | None) -> TokenPayload | None:
        """Decode a token without raising.

        Returns:
            Payload if token is valid, None if token is missing or invalid
        """
        if not token:
            return None

        try:
            return self.verify_token(token)
        except JWTError as e:
            # Invalid or expired token, treat as unauthenticated
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None

    def get_user_id_from_token(self, token: str | None) -> UserId | None:
        """Extract user ID from JWT token without raising exceptions.

        This is a convenience method for API routes that need to optionally
        authenticate users without failing on invalid tokens.
        """
        payload = self.get_payload_from_token(token)
        if not payload:
            return None
        try:
            return UserId(UUID(payload.user_id))
        except ValueError:
            logfire.debug("JWT user_id is not a UUID", user_id=payload.user_id)
            return None
