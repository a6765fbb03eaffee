"""API token domain service."""

import secrets

import logfire

from depot.config import AuthSettings
from depot.domain.error import UnauthenticatedError
from depot.domain.model import Account, ApiToken
from depot.domain.repository import AccountRepository, ApiTokenRepository
from depot.domain.value import AccountId

from .base import Service


class ApiTokenService(Service):
    """Domain service for API token authentication."""

    def __init__(
        self,
        api_token_repository: ApiTokenRepository,
        account_repository: AccountRepository,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize API token service.

        Args:
            api_token_repository: API token repository
            account_repository: Account repository
            auth_settings: Authentication settings
        """
        self.api_token_repository = api_token_repository
        self.account_repository = account_repository
        self.auth_settings = auth_settings

    async def authenticate(self, secret: str) -> Account:
        """Resolve an API token secret to its owning account.

        Lookup is by the token's account id, so later logins that change
        the account's login or provider token do not affect it. Never
        writes.

        Args:
            secret: Token secret presented by the client

        Returns:
            The owning account

        Raises:
            UnauthenticatedError: If no token matches
        """
        with logfire.span("api_token_service.authenticate"):
            if not secret or not secret.strip():
                raise UnauthenticatedError()

            token = await self.api_token_repository.find_by_secret(secret)
            if token is None:
                logfire.warn("Unknown API token presented")
                raise UnauthenticatedError()

            account = await self.account_repository.find_by_id(token.account_id)
            if account is None:
                # Foreign key makes this impossible unless storage is corrupt
                logfire.error(
                    "API token references missing account",
                    token_id=str(token.id),
                    account_id=str(token.account_id),
                )
                raise RuntimeError(
                    f"api token {token.id} references missing account {token.account_id}"
                )

            logfire.info("API token authenticated", account_id=str(account.id))
            return account

    async def issue(self, account_id: AccountId, name: str) -> ApiToken:
        """Generate and store a new token for an account.

        Args:
            account_id: Owning account
            name: Human-readable label

        Returns:
            The stored token, including its secret

        Raises:
            ConflictError: If the generated secret collides with an existing one
        """
        with logfire.span(
            "api_token_service.issue", account_id=str(account_id), name=name
        ):
            secret = secrets.token_urlsafe(self.auth_settings.api_token_bytes)
            token = await self.api_token_repository.insert(account_id, name, secret)
            logfire.info(
                "API token issued", account_id=str(account_id), token_id=str(token.id)
            )
            return token

    async def list_for_account(self, account_id: AccountId) -> list[ApiToken]:
        """List an account's tokens, oldest first."""
        with logfire.span(
            "api_token_service.list_for_account", account_id=str(account_id)
        ):
            return await self.api_token_repository.find_all_by_account(account_id)
