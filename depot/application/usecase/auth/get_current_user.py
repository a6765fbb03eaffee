"""Get current user use case."""

from datetime import datetime

from pydantic import BaseModel

from depot.config import Settings
from depot.application.view import AccountView
from depot.domain.service import AccountService, ApiTokenService
from depot.domain.value import AccountId


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    account_id: int  # Resolved from the request credentials


class ApiTokenInfo(BaseModel):
    """API token metadata; the secret is never echoed back."""

    id: int
    name: str
    created_at: datetime
    last_used_at: datetime | None


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user: AccountView
    api_tokens: list[ApiTokenInfo]


class GetCurrentUserUseCase:
    """Use case for getting the authenticated account."""

    def __init__(
        self,
        account_service: AccountService,
        api_token_service: ApiTokenService,
        settings: Settings,
    ) -> None:
        self.account_service = account_service
        self.api_token_service = api_token_service
        self.settings = settings

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Load the caller's own account, email included.

        Raises:
            NotFoundError: If the account no longer exists
        """
        account_id = AccountId(request.account_id)
        account = await self.account_service.get_by_id(account_id)
        tokens = await self.api_token_service.list_for_account(account_id)

        return GetCurrentUserResponse(
            user=AccountView.project(
                account, self.settings.auth.github.profile_base_url, private=True
            ),
            api_tokens=[
                ApiTokenInfo(
                    id=token.id,
                    name=token.name,
                    created_at=token.created_at,
                    last_used_at=token.last_used_at,
                )
                for token in tokens
            ],
        )
