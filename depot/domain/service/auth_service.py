"""Authentication domain service."""

import logfire

from depot.domain.error import UnauthenticatedError
from depot.domain.value import (
    AccountId,
    Credentials,
    ProviderIdentity,
    SessionCredentials,
    TokenCredentials,
)
from depot.util.jwt import JWTError

from .api_token_service import ApiTokenService
from .base import Service
from .jwt_service import JWTService


class OAuthClient:
    """Identity provider client interface."""

    def authorize_url(self, state: str) -> str:
        """Build the URL the browser is sent to for consent.

        Args:
            state: Opaque CSRF state echoed back on the callback

        Returns:
            Authorization URL
        """
        raise NotImplementedError

    async def exchange(self, code: str) -> ProviderIdentity:
        """Trade an authorization code for the user's identity.

        Args:
            code: Authorization code from the callback

        Returns:
            Verified provider identity
        """
        raise NotImplementedError


class AuthService(Service):
    """Domain service for login and request authentication.

    Requests authenticate in one of two ways: a browser session (a signed
    token in a cookie) or an API token. Both resolve to an account id.
    """

    def __init__(
        self,
        oauth_client: OAuthClient,
        jwt_service: JWTService,
        api_token_service: ApiTokenService,
    ) -> None:
        """Initialize auth service.

        Args:
            oauth_client: Identity provider client
            jwt_service: Session token service
            api_token_service: API token service
        """
        self.oauth_client = oauth_client
        self.jwt_service = jwt_service
        self.api_token_service = api_token_service

    def authorize_url(self, state: str) -> str:
        return self.oauth_client.authorize_url(state)

    async def complete_login(self, code: str) -> ProviderIdentity:
        """Exchange a callback code for a provider identity.

        Raises:
            ProviderError: If the provider rejects the code or is unreachable
        """
        with logfire.span("auth_service.complete_login"):
            identity = await self.oauth_client.exchange(code)
            logfire.info(
                "Provider login completed",
                external_id=identity.external_id,
                login=identity.login.root,
            )
            return identity

    async def resolve(self, credentials: Credentials | None) -> AccountId:
        """Resolve request credentials to an account id.

        Args:
            credentials: Session or API token credentials, None if absent

        Returns:
            The authenticated account id

        Raises:
            UnauthenticatedError: If credentials are missing or invalid
        """
        with logfire.span("auth_service.resolve"):
            if credentials is None:
                raise UnauthenticatedError()

            if isinstance(credentials, SessionCredentials):
                try:
                    payload = self.jwt_service.verify_token(credentials.token)
                except JWTError as e:
                    logfire.info("Session token rejected", reason=str(e))
                    raise UnauthenticatedError() from e
                return AccountId(payload.account_id)

            if isinstance(credentials, TokenCredentials):
                account = await self.api_token_service.authenticate(credentials.secret)
                return account.id

            raise UnauthenticatedError()
