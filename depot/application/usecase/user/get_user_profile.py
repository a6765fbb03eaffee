"""Get user profile use case."""

from pydantic import BaseModel

from depot.config import Settings
from depot.application.view import AccountView
from depot.domain.service import AccountService
from depot.domain.value import Login


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    login: Login


class GetUserProfileResponse(BaseModel):
    """Public profile; email is always omitted."""

    user: AccountView


class GetUserProfileUseCase:
    """Use case for getting an account's public profile by login."""

    def __init__(self, account_service: AccountService, settings: Settings) -> None:
        """Initialize get user profile use case.

        Args:
            account_service: Account domain service
            settings: Application settings
        """
        self.account_service = account_service
        self.settings = settings

    async def execute(self, request: GetUserProfileRequest) -> GetUserProfileResponse:
        """Look up an account by login.

        Raises:
            NotFoundError: If no account holds that login
        """
        account = await self.account_service.get_by_login(request.login)
        return GetUserProfileResponse(
            user=AccountView.project(
                account, self.settings.auth.github.profile_base_url, private=False
            )
        )
