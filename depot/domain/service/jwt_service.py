"""Session token domain service."""

import logfire

from depot.config import AuthSettings
from depot.util.jwt import TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for session token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, account_id: int, login: str) -> str:
        """Create a session token for an account.

        Args:
            account_id: Account ID
            login: Account login

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", account_id=str(account_id)):
            token = create_token(account_id, login, self.auth_settings)
            logfire.info("Session token created", account_id=str(account_id))
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a session token and extract its payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            return verify_token(token, self.auth_settings)
