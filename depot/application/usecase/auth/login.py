"""Login use case."""

import secrets

import logfire
from pydantic import BaseModel

from depot.config import Settings
from depot.application.view import AccountView
from depot.domain.error import InvalidInputError
from depot.domain.service import AccountService, AuthService, JWTService


class LoginRequest(BaseModel):
    """Login request from the OAuth callback."""

    code: str  # OAuth authorization code
    state: str  # State echoed back by GitHub
    expected_state: str | None = None  # State issued with the authorize URL


class LoginResponse(BaseModel):
    """Login response."""

    token: str
    user: AccountView


class LoginUseCase:
    """Use case for logging in through GitHub."""

    def __init__(
        self,
        auth_service: AuthService,
        account_service: AccountService,
        jwt_service: JWTService,
        settings: Settings,
    ) -> None:
        """Initialize login use case.

        Args:
            auth_service: Authentication domain service
            account_service: Account domain service
            jwt_service: Session token service
            settings: Application settings
        """
        self.auth_service = auth_service
        self.account_service = account_service
        self.jwt_service = jwt_service
        self.settings = settings

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute the login flow.

        Steps:
        1. Check the returned state against the one we issued
        2. Exchange the code for the GitHub identity
        3. Reconcile the identity into an account
        4. Sign a session token

        Args:
            request: Callback parameters and the issued state

        Returns:
            Session token and the private view of the account

        Raises:
            InvalidInputError: If the state is missing or does not match
            ProviderError: If GitHub rejects the code
        """
        if not request.expected_state or not secrets.compare_digest(
            request.state.encode(), request.expected_state.encode()
        ):
            logfire.warn("OAuth state mismatch")
            raise InvalidInputError("invalid state parameter")

        identity = await self.auth_service.complete_login(request.code)
        account = await self.account_service.reconcile(identity)

        token = self.jwt_service.create_token(account.id, account.login.root)

        return LoginResponse(
            token=token,
            user=AccountView.project(
                account, self.settings.auth.github.profile_base_url, private=True
            ),
        )
