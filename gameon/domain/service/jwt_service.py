"""JWT token domain service."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

import logfire

from gameon.config import AuthSettings
from gameon.domain.error import UnauthorizedError
from gameon.domain.value import AuthenticatedUser
from gameon.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class IdentityProvider(ABC):
    """Resolves the caller's identity from a session token."""

    @abstractmethod
    def require_auth(self, token: Optional[str]) -> AuthenticatedUser:
        """Resolve the authenticated user.

        Args:
            token: Session token presented by the caller

        Returns:
            The authenticated user

        Raises:
            UnauthorizedError: If the token is missing or invalid
        """
        pass


class JWTService(Service, IdentityProvider):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: str) -> str:
        """Create JWT token for user.

        Args:
            user_id: User ID

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id):
            token = create_token(user_id, self.auth_settings)
            logfire.info("JWT token created", user_id=user_id)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", user_id=payload.user_id)
                return payload
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def require_auth(self, token: Optional[str]) -> AuthenticatedUser:
        """Resolve the caller or raise ``UnauthorizedError``."""
        if not token:
            raise UnauthorizedError()

        try:
            payload = self.verify_token(token)
            UUID(payload.user_id)
        except (JWTError, ValueError) as e:
            raise UnauthorizedError(str(e)) from e
        return AuthenticatedUser(id=payload.user_id)
